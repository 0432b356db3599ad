"""
Accounts module exceptions.
"""

from shared.exceptions import AuthenticationError, ExternalServiceError, NotFoundError


class InvalidCredentialsError(AuthenticationError):
    """Raised when email and password do not match an account."""

    def __init__(self, message: str = "E-mail ou senha inválidos. Tente novamente."):
        super().__init__(message, code="INVALID_CREDENTIALS")
        self.user_message = message


class ServiceUnavailableError(ExternalServiceError):
    """Raised when the backend cannot be reached or fails unexpectedly."""

    def __init__(self, service: str, message: str):
        super().__init__(
            f"Service unavailable ({service}): {message}",
            service=service,
            code="SERVICE_UNAVAILABLE",
            details={"error": message},
        )


class PersonNotFoundError(NotFoundError):
    """Raised when an account has no linked person."""

    def __init__(self, account_id: str):
        super().__init__(
            f"No profile linked to account: {account_id}",
            code="PERSON_NOT_FOUND",
            details={"account_id": account_id},
        )
