"""
Shared infrastructure for the Material Share client.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- http_client: httpx client factory
- models: Session record and user type
- session: Explicit session context and its stores

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .http_client import get_api_client, get_lookup_client, close_api_client, reset_client_cache
from .exceptions import (
    MaterialShareError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
)
from .models import SessionRecord, UserType
from .session import (
    ISessionStore,
    InMemorySessionStore,
    FileSessionStore,
    SessionContext,
    SessionRequiredError,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_api_client",
    "get_lookup_client",
    "close_api_client",
    "reset_client_cache",
    "MaterialShareError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "ExternalServiceError",
    "SessionRecord",
    "UserType",
    "ISessionStore",
    "InMemorySessionStore",
    "FileSessionStore",
    "SessionContext",
    "SessionRequiredError",
]
