"""
Accounts module.

Account authentication and the person profile linked to it.

Public API:
- IAccountService: Remote account operations
- IPersonService: Remote person operations
- AccountSession: Login, logout, profile edit and deactivation flows
- NewAccount, PersonFields, ProfileChanges, Person: Data models
- Exceptions: InvalidCredentialsError, ServiceUnavailableError, PersonNotFoundError
"""

from .interfaces import IAccountService, IPersonService
from .models import NewAccount, PersonFields, ProfileChanges, Person
from .service import AccountSession
from .exceptions import (
    InvalidCredentialsError,
    ServiceUnavailableError,
    PersonNotFoundError,
)

__all__ = [
    # Interfaces
    "IAccountService",
    "IPersonService",
    # Service
    "AccountSession",
    # Models
    "NewAccount",
    "PersonFields",
    "ProfileChanges",
    "Person",
    # Exceptions
    "InvalidCredentialsError",
    "ServiceUnavailableError",
    "PersonNotFoundError",
]
