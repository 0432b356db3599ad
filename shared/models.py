"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserType(str, Enum):
    """Advisory user-type flag chosen at sign-up (not access control)."""

    DONOR = "DOADOR"
    BENEFICIARY = "BENEFICIADO"


class SessionRecord(BaseModel):
    """
    Snapshot of the logged-in account and its person profile.

    Written only by login, logout and profile-edit success.
    Immutable, so a reader holding a record never sees a partial update.
    """

    account_id: str = Field(..., description="Account ID (server-assigned)")
    email: str = Field(..., description="Account email")
    name: str = Field(default="", description="Display name")
    person_id: Optional[str] = Field(None, description="Linked person ID")
    user_type: Optional[UserType] = Field(None, description="Advisory user type")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def has_profile(self) -> bool:
        """Whether the account is linked to a person record."""
        return self.person_id is not None
