"""
Submission module.

Sequences validation, remote calls and feedback for form submissions.

Public API:
- SubmissionOrchestrator: busy latch and feedback state for one form
- SignUpSubmission: resumable two-phase sign-up
- DonationSubmission: donation create and edit
- SubmissionState, OutcomeStatus, SubmissionOutcome: Data models
- Exceptions: SubmissionError, AccountCreationError, ProfileIncompleteError
"""

from .models import SubmissionState, OutcomeStatus, SubmissionOutcome
from .service import (
    GENERIC_FAILURE_MESSAGE,
    SubmissionOrchestrator,
    SignUpSubmission,
    DonationSubmission,
)
from .exceptions import (
    SubmissionError,
    AccountCreationError,
    ProfileIncompleteError,
)

__all__ = [
    # Service
    "GENERIC_FAILURE_MESSAGE",
    "SubmissionOrchestrator",
    "SignUpSubmission",
    "DonationSubmission",
    # Models
    "SubmissionState",
    "OutcomeStatus",
    "SubmissionOutcome",
    # Exceptions
    "SubmissionError",
    "AccountCreationError",
    "ProfileIncompleteError",
]
