"""
Validation module data models.

Forms hold raw user input exactly as typed (masked or not). The pipeline,
not the model, decides whether the input is acceptable.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import UserType


class FailureCode(str, Enum):
    """Stable identifiers for every rule the pipelines can fail on."""

    # Sign-up
    NAME_REQUIRED = "NAME_REQUIRED"
    BIRTH_DATE_INVALID = "BIRTH_DATE_INVALID"
    PHONE_INCOMPLETE = "PHONE_INCOMPLETE"
    POSTAL_CODE_LENGTH = "POSTAL_CODE_LENGTH"
    POSTAL_CODE_NOT_FOUND = "POSTAL_CODE_NOT_FOUND"
    POSTAL_CODE_LOOKUP_FAILED = "POSTAL_CODE_LOOKUP_FAILED"
    DOCUMENT_INVALID = "DOCUMENT_INVALID"
    EMAIL_INVALID = "EMAIL_INVALID"
    PASSWORD_LENGTH = "PASSWORD_LENGTH"
    USER_TYPE_REQUIRED = "USER_TYPE_REQUIRED"

    # Donation
    DESCRIPTION_REQUIRED = "DESCRIPTION_REQUIRED"
    QUANTITY_INVALID = "QUANTITY_INVALID"
    CATEGORY_REQUIRED = "CATEGORY_REQUIRED"
    CATEGORY_INACTIVE = "CATEGORY_INACTIVE"
    POSTAL_CODE_REQUIRED = "POSTAL_CODE_REQUIRED"
    HOUSE_NUMBER_REQUIRED = "HOUSE_NUMBER_REQUIRED"

    # Login
    CREDENTIALS_REQUIRED = "CREDENTIALS_REQUIRED"


class ValidationFailure(BaseModel):
    """The first rule a submission failed, with the message shown to the user."""

    code: FailureCode = Field(..., description="Rule identifier")
    field: str = Field(..., description="Form field the rule checks")
    message: str = Field(..., description="Human-readable reason")

    model_config = {"frozen": True}

    @property
    def is_connectivity_problem(self) -> bool:
        """Whether the failure came from an unreachable lookup, not bad input."""
        return self.code == FailureCode.POSTAL_CODE_LOOKUP_FAILED


class SignUpForm(BaseModel):
    """Raw sign-up form input."""

    name: str = ""
    birth_date: str = Field(default="", description="DD/MM/YYYY, optional")
    phone: str = Field(default="", description="Mobile phone, optional")
    document: str = Field(default="", description="CPF or CNPJ")
    postal_code: str = Field(default="", description="CEP, optional")
    email: str = ""
    password: str = ""
    user_type: Optional[UserType] = None


class DonationForm(BaseModel):
    """Raw donation form input."""

    name: str = ""
    description: str = ""
    quantity: str = Field(default="", description="Typed quantity")
    category_id: Optional[str] = None
    postal_code: str = ""
    house_number: str = ""
    complement: str = ""

    model_config = {"coerce_numbers_to_str": True}


class LoginForm(BaseModel):
    """Raw login form input."""

    email: str = ""
    password: str = ""


class PostalAddress(BaseModel):
    """Address a CEP resolves to."""

    postal_code: str = Field(..., description="CEP digits")
    street: str = ""
    complement: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
