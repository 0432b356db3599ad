"""
Donations module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    ConflictError,
)

from .models import TransitionRejected


class DonationNotFoundError(NotFoundError):
    """Raised when a donation is not found."""

    def __init__(self, donation_id: str):
        super().__init__(
            f"Donation not found: {donation_id}",
            code="DONATION_NOT_FOUND",
            details={"donation_id": donation_id},
        )


class InvalidTransitionError(ValidationError):
    """Raised locally, before any network call, for an illegal status change."""

    def __init__(self, donation_id: str, rejection: TransitionRejected):
        super().__init__(
            rejection.message,
            code="INVALID_TRANSITION",
            details={
                "donation_id": donation_id,
                "current": rejection.current.value,
                "target": rejection.target.value,
                "reason": rejection.reason.value,
            },
        )
        self.rejection = rejection
        self.user_message = rejection.message


class DonationNotEditableError(ValidationError):
    """Raised when editing a donation that is no longer ACTIVE."""

    user_message = "Esta doação não pode mais ser editada."

    def __init__(self, donation_id: str, status: str):
        super().__init__(
            f"Donation {donation_id} can no longer be edited (status {status})",
            code="DONATION_NOT_EDITABLE",
            details={"donation_id": donation_id, "status": status},
        )


class StaleDonationStatusError(ConflictError):
    """Raised when the backend refuses a change because the status moved on."""

    user_message = "Esta doação foi alterada por outra pessoa. Atualize a lista e tente novamente."

    def __init__(self, donation_id: str, message: str = ""):
        super().__init__(
            f"Donation status changed on the server: {donation_id}",
            code="STALE_DONATION_STATUS",
            details={"donation_id": donation_id, "error": message},
        )
