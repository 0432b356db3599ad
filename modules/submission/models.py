"""
Submission module data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.validation.models import ValidationFailure


class SubmissionState(str, Enum):
    """Feedback state a form shows while and after submitting."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class OutcomeStatus(str, Enum):
    """How a single submit call ended."""

    SUCCESS = "success"
    INVALID = "invalid"  # Validation failed, nothing was sent
    FAILED = "failed"    # A remote call failed
    BUSY = "busy"        # Another submit was in flight, nothing was done


class SubmissionOutcome(BaseModel):
    """Result of one submit call, returned to the caller."""

    status: OutcomeStatus
    message: str = Field(default="", description="Message shown to the user")
    failure: Optional[ValidationFailure] = Field(
        None, description="First failed rule, when status is INVALID"
    )
    error_code: Optional[str] = Field(
        None, description="Code of the caught error, when status is FAILED"
    )
    resource_id: Optional[str] = Field(
        None, description="ID of the created or updated resource"
    )

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @classmethod
    def busy(cls) -> "SubmissionOutcome":
        return cls(status=OutcomeStatus.BUSY)

    @classmethod
    def invalid(cls, failure: ValidationFailure) -> "SubmissionOutcome":
        return cls(status=OutcomeStatus.INVALID, message=failure.message, failure=failure)
