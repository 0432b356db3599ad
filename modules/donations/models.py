"""
Donations module data models.

These models define the donation record, its closed set of lifecycle
states, and the result values returned by lifecycle transitions.
"""

from enum import Enum
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field

from modules.formatting import strip_non_digits
from modules.validation.models import DonationForm
from modules.validation.rules import parse_quantity


class DonationStatus(str, Enum):
    """Donation lifecycle status. Values are the backend wire values."""

    ACTIVE = "ATIVO"          # Listed and available
    REQUESTED = "SOLICITADO"  # A beneficiary expressed interest
    DONATED = "DOADO"         # Handoff confirmed (terminal)
    INACTIVE = "INATIVO"      # Withdrawn by the donor (terminal)

    @property
    def is_terminal(self) -> bool:
        return self in (DonationStatus.DONATED, DonationStatus.INACTIVE)


class Actor(str, Enum):
    """Who is asking for a status change."""

    DONOR = "donor"
    BENEFICIARY = "beneficiary"
    SYSTEM = "system"


class CategoryStatus(str, Enum):
    ACTIVE = "ATIVO"
    INACTIVE = "INATIVO"


class Category(BaseModel):
    """Material category a donation is filed under."""

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Display name")
    status: CategoryStatus = Field(default=CategoryStatus.ACTIVE)

    model_config = {"coerce_numbers_to_str": True}

    @property
    def is_active(self) -> bool:
        return self.status == CategoryStatus.ACTIVE


class Donation(BaseModel):
    """One listed material item."""

    id: str = Field(..., description="Donation ID (server-assigned)")
    name: str = Field(..., min_length=1, description="Material name")
    description: str = Field(..., min_length=1, description="Material description")
    quantity: int = Field(..., gt=0, description="Number of units")
    category_id: str = Field(..., description="Category reference")
    category_name: Optional[str] = Field(None, description="Category display name")
    postal_code: str = Field(..., description="CEP digits")
    house_number: str = Field(..., description="House number")
    complement: Optional[str] = Field(None, description="Address complement")
    owner_id: str = Field(..., description="Donor person ID")
    status: DonationStatus = Field(default=DonationStatus.ACTIVE)

    model_config = {"coerce_numbers_to_str": True}


class DonationFields(BaseModel):
    """Payload for creating or updating a donation."""

    name: str
    description: str
    quantity: int = Field(..., gt=0)
    category_id: str
    postal_code: str
    house_number: str
    complement: str = ""
    owner_id: str
    status: DonationStatus = DonationStatus.ACTIVE

    @classmethod
    def from_form(cls, form: DonationForm, owner_id: str) -> "DonationFields":
        """
        Build the payload from a form that already passed validation.

        Args:
            form: Validated donation form
            owner_id: Person ID of the donor

        Returns:
            Normalized fields (trimmed text, CEP digits, integer quantity)
        """
        return cls(
            name=form.name.strip(),
            description=form.description.strip(),
            quantity=parse_quantity(form.quantity),
            category_id=form.category_id,
            postal_code=strip_non_digits(form.postal_code),
            house_number=form.house_number.strip(),
            complement=form.complement.strip(),
            owner_id=owner_id,
        )


class RejectionReason(str, Enum):
    """Why a lifecycle transition was refused."""

    TERMINAL_STATE = "TERMINAL_STATE"
    ILLEGAL_TRANSITION = "ILLEGAL_TRANSITION"
    ACTOR_NOT_ALLOWED = "ACTOR_NOT_ALLOWED"


class TransitionAccepted(BaseModel):
    """A legal transition; `status` is the state to move to."""

    ok: Literal[True] = True
    previous: DonationStatus
    status: DonationStatus

    model_config = {"frozen": True}


class TransitionRejected(BaseModel):
    """An illegal transition; the donation keeps `current`."""

    ok: Literal[False] = False
    current: DonationStatus
    target: DonationStatus
    reason: RejectionReason
    message: str

    model_config = {"frozen": True}


TransitionResult = Union[TransitionAccepted, TransitionRejected]
