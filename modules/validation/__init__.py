"""
Validation module.

Ordered, short-circuiting rule pipelines that gate submissions before they
reach the network.

Public API:
- SubmissionValidator: sign-up (async), donation and login pipelines
- IPostalCodeLookup: interface for the remote CEP check
- ValidationFailure / FailureCode: first-failure result
- SignUpForm, DonationForm, LoginForm: raw form input
- is_valid_cpf, is_valid_cnpj, is_valid_document: checksum helpers
"""

from .interfaces import IPostalCodeLookup
from .models import (
    FailureCode,
    ValidationFailure,
    SignUpForm,
    DonationForm,
    LoginForm,
    PostalAddress,
)
from .documents import is_valid_cpf, is_valid_cnpj, is_valid_document
from .exceptions import PostalCodeLookupError
from .service import SubmissionValidator

__all__ = [
    # Interface
    "IPostalCodeLookup",
    # Models
    "FailureCode",
    "ValidationFailure",
    "SignUpForm",
    "DonationForm",
    "LoginForm",
    "PostalAddress",
    # Checksums
    "is_valid_cpf",
    "is_valid_cnpj",
    "is_valid_document",
    # Exceptions
    "PostalCodeLookupError",
    # Service
    "SubmissionValidator",
]
