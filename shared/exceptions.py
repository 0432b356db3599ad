"""
Error hierarchy for the Material Share client core.

Module exceptions (donations, accounts, submission, validation) derive from
the classes here. The HTTP clients translate wire failures into them and the
submission orchestrator turns any MaterialShareError into a failed outcome,
showing `user_message` when the error carries one.
"""

from typing import Optional, Any


class MaterialShareError(Exception):
    """
    Root of every error the client core raises on purpose.

    `code` is a stable identifier for logs and tests; `user_message`, when
    set, is Portuguese text the app may show as is.
    """

    user_message: Optional[str] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Code, message and details, as logged by the orchestrator."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(MaterialShareError):
    """The backend has no such account, person or donation (HTTP 404)."""

    pass


class ValidationError(MaterialShareError):
    """A request was refused for its content, locally or by the backend."""

    pass


class AuthenticationError(MaterialShareError):
    """Missing session, or the backend refused the caller (HTTP 401)."""

    pass


class ConflictError(MaterialShareError):
    """The resource changed on the server since it was last read."""

    pass


class ExternalServiceError(MaterialShareError):
    """A remote service (backend or ViaCEP) could not serve the request."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
