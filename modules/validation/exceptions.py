"""
Validation module exceptions.
"""

from shared.exceptions import ExternalServiceError


class PostalCodeLookupError(ExternalServiceError):
    """Raised when the postal-code lookup service cannot be reached."""

    def __init__(self, postal_code: str, message: str):
        super().__init__(
            f"Postal code lookup failed for {postal_code}: {message}",
            service="viacep",
            code="POSTAL_CODE_LOOKUP_FAILED",
            details={"postal_code": postal_code, "error": message},
        )
