"""
Donations module interfaces.

Contracts for the remote donation and category services. The HTTP
implementations live in clients/; tests use in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Category, Donation, DonationFields, DonationStatus


@runtime_checkable
class IDonationService(Protocol):
    """Remote donation operations."""

    async def create_donation(self, fields: DonationFields) -> str:
        """
        Create a donation.

        Returns:
            The server-assigned donation ID
        """
        ...

    async def update_donation(self, donation_id: str, fields: DonationFields) -> None:
        """Replace the editable fields of a donation."""
        ...

    async def set_status(self, donation_id: str, status: DonationStatus) -> None:
        """
        Change the status of a donation.

        Raises:
            StaleDonationStatusError: If the server-side status changed
            DonationNotFoundError: If the donation no longer exists
        """
        ...

    async def find_donation(self, donation_id: str) -> Optional[Donation]:
        """Get a donation by ID, or None if it does not exist."""
        ...

    async def list_by_owner(self, person_id: str) -> list[Donation]:
        """Donations listed by a donor."""
        ...

    async def list_requested_by_beneficiary(self, person_id: str) -> list[Donation]:
        """Donations a beneficiary has requested."""
        ...


@runtime_checkable
class ICategoryService(Protocol):
    """Remote category catalogue."""

    async def list_active_categories(self) -> list[Category]:
        """Categories currently accepting new donations."""
        ...
