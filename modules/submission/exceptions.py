"""
Submission module exceptions.

Raised by the perform step of a submission and caught by the orchestrator,
which turns them into user-facing outcomes.
"""

from typing import Any, Optional

from shared.exceptions import MaterialShareError


class SubmissionError(MaterialShareError):
    """Base exception for failed submissions."""

    user_message = "Não foi possível concluir a operação. Tente novamente."


class AccountCreationError(SubmissionError):
    """Phase 1 of sign-up failed: no account exists."""

    user_message = (
        "Não foi possível criar a conta. "
        "O e-mail ou CPF/CNPJ já pode estar em uso."
    )

    def __init__(self, message: str = "account creation failed", details: Optional[dict[str, Any]] = None):
        super().__init__(message, code="ACCOUNT_CREATION_FAILED", details=details)


class ProfileIncompleteError(SubmissionError):
    """Phase 2 of sign-up failed: the account exists but has no profile."""

    user_message = (
        "Sua conta foi criada, mas o perfil não foi concluído. "
        "Tente enviar novamente."
    )

    def __init__(self, account_id: str, details: Optional[dict[str, Any]] = None):
        super().__init__(
            "account created, profile incomplete",
            code="PROFILE_INCOMPLETE",
            details={"account_id": account_id, **(details or {})},
        )
        self.account_id = account_id
