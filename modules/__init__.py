"""
Feature modules of the Material Share client core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the remote services it consumes
- models.py: Pydantic models for forms, records and results
- service.py: Flow logic over those interfaces
- exceptions.py: Module-specific exceptions

Modules depend on each other's interfaces and models, never on the HTTP
clients; those are wired in by the caller.
"""
