"""
Donations module.

Handles the donation lifecycle and the local donation lists.

Public API:
- DonationStatus, Actor: closed lifecycle variant and the requesting party
- lifecycle: transition functions returning TransitionResult
- DonationBoard: local list with guarded, confirm-then-apply status changes
- IDonationService, ICategoryService: remote service interfaces
"""

from . import lifecycle
from .interfaces import IDonationService, ICategoryService
from .models import (
    Actor,
    Category,
    CategoryStatus,
    Donation,
    DonationFields,
    DonationStatus,
    RejectionReason,
    TransitionAccepted,
    TransitionRejected,
    TransitionResult,
)
from .exceptions import (
    DonationNotFoundError,
    DonationNotEditableError,
    InvalidTransitionError,
    StaleDonationStatusError,
)
from .service import BoardView, DonationBoard

__all__ = [
    "lifecycle",
    # Interfaces
    "IDonationService",
    "ICategoryService",
    # Models
    "Actor",
    "Category",
    "CategoryStatus",
    "Donation",
    "DonationFields",
    "DonationStatus",
    "RejectionReason",
    "TransitionAccepted",
    "TransitionRejected",
    "TransitionResult",
    # Exceptions
    "DonationNotFoundError",
    "DonationNotEditableError",
    "InvalidTransitionError",
    "StaleDonationStatusError",
    # Service
    "BoardView",
    "DonationBoard",
]
