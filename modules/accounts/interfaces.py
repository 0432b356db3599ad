"""
Accounts module interfaces.

Contracts for the remote account and person services.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import SessionRecord

from .models import NewAccount, Person, PersonFields, ProfileChanges


@runtime_checkable
class IAccountService(Protocol):
    """Remote account operations."""

    async def create_account(self, account: NewAccount) -> str:
        """
        Create an account.

        Returns:
            The new account ID
        """
        ...

    async def authenticate(self, email: str, password: str) -> SessionRecord:
        """
        Check credentials.

        Returns:
            Session record for the account (without person data)

        Raises:
            InvalidCredentialsError: If the login endpoint answers 401
            ServiceUnavailableError: If the backend cannot be reached
        """
        ...

    async def invalidate_account(self, account_id: str) -> None:
        """Deactivate an account."""
        ...


@runtime_checkable
class IPersonService(Protocol):
    """Remote person (profile) operations."""

    async def create_person(self, fields: PersonFields, account_id: str) -> str:
        """
        Create the profile linked to an account.

        Returns:
            The new person ID
        """
        ...

    async def update_person(self, person_id: str, changes: ProfileChanges) -> None:
        """Apply profile changes."""
        ...

    async def find_person(self, person_id: str) -> Optional[Person]:
        """Get a person by ID, or None."""
        ...

    async def find_person_by_account(self, account_id: str) -> Optional[Person]:
        """Get the person linked to an account, or None."""
        ...
