"""
Accounts module data models.

An Account is the authentication identity (email + password) owned by the
backend; a Person is the profile linked to it one-to-one.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

from modules.formatting import strip_non_digits
from modules.validation.models import SignUpForm
from modules.validation.rules import parse_birth_date
from shared.models import UserType


class NewAccount(BaseModel):
    """Credentials for account creation."""

    name: str
    email: str
    password: str = Field(..., repr=False)


class PersonFields(BaseModel):
    """Profile fields sent when creating a person."""

    name: str
    document: str = Field(..., description="CPF/CNPJ digits")
    user_type: UserType
    birth_date: Optional[date] = None
    phone: Optional[str] = Field(None, description="Phone digits")
    postal_code: Optional[str] = Field(None, description="CEP digits")

    @classmethod
    def from_sign_up(cls, form: SignUpForm) -> "PersonFields":
        """
        Normalize a sign-up form that already passed validation.

        Optional fields left blank are sent as absent, not empty.
        """
        return cls(
            name=form.name.strip(),
            document=strip_non_digits(form.document),
            user_type=form.user_type,
            birth_date=parse_birth_date(form.birth_date) if form.birth_date else None,
            phone=strip_non_digits(form.phone) or None,
            postal_code=strip_non_digits(form.postal_code) or None,
        )


class ProfileChanges(BaseModel):
    """Fields a person may edit on their own profile. None means unchanged."""

    name: Optional[str] = None
    birth_date: Optional[date] = None
    phone: Optional[str] = None
    postal_code: Optional[str] = None


class Person(BaseModel):
    """Profile behind a user account."""

    id: str = Field(..., description="Person ID (server-assigned)")
    account_id: str = Field(..., description="Linked account ID")
    name: str = Field(..., description="Full name")
    document: str = Field(..., description="CPF/CNPJ digits")
    user_type: Optional[UserType] = Field(None, description="Advisory user type")
    birth_date: Optional[date] = None
    phone: Optional[str] = None
    postal_code: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}
