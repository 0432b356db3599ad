"""
Local validation rules.

Each rule is a pure function returning None when the input passes, or the
ValidationFailure to report. None of them perform I/O.
"""

from datetime import date, datetime
from typing import Collection, Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from modules.formatting import strip_non_digits
from shared.models import UserType

from .documents import is_valid_document
from .models import FailureCode, ValidationFailure

BIRTH_DATE_FORMAT = "%d/%m/%Y"
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 11
POSTAL_CODE_DIGITS = 8
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100

MESSAGES = {
    FailureCode.NAME_REQUIRED: "O nome completo é obrigatório.",
    FailureCode.BIRTH_DATE_INVALID: "Data de Nascimento inválida ou futura.",
    FailureCode.PHONE_INCOMPLETE: "O número de celular está incompleto.",
    FailureCode.POSTAL_CODE_LENGTH: "O CEP deve conter 8 dígitos.",
    FailureCode.POSTAL_CODE_NOT_FOUND: "CEP não encontrado.",
    FailureCode.POSTAL_CODE_LOOKUP_FAILED: "Erro ao validar o CEP. Verifique sua conexão.",
    FailureCode.DOCUMENT_INVALID: "O CPF ou CNPJ informado é inválido.",
    FailureCode.EMAIL_INVALID: "O e-mail é inválido.",
    FailureCode.PASSWORD_LENGTH: (
        f"A senha deve ter entre {PASSWORD_MIN_LENGTH} e {PASSWORD_MAX_LENGTH} caracteres."
    ),
    FailureCode.USER_TYPE_REQUIRED: "Por favor, selecione um tipo de usuário.",
    FailureCode.DESCRIPTION_REQUIRED: "A descrição do material é obrigatória.",
    FailureCode.QUANTITY_INVALID: "A quantidade deve ser um número inteiro maior que zero.",
    FailureCode.CATEGORY_REQUIRED: "Selecione uma categoria.",
    FailureCode.CATEGORY_INACTIVE: "A categoria selecionada não está mais disponível.",
    FailureCode.POSTAL_CODE_REQUIRED: "O CEP é obrigatório.",
    FailureCode.HOUSE_NUMBER_REQUIRED: "O número da residência é obrigatório.",
    FailureCode.CREDENTIALS_REQUIRED: "Por favor, preencha todos os campos.",
}

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def failure(code: FailureCode, field: str) -> ValidationFailure:
    """Build the failure for a rule with its standard message."""
    return ValidationFailure(code=code, field=field, message=MESSAGES[code])


# ---------------------------------------------------------------------------
# Sign-up rules
# ---------------------------------------------------------------------------

def check_name(name: str, field: str = "name") -> Optional[ValidationFailure]:
    if not name or not name.strip():
        return failure(FailureCode.NAME_REQUIRED, field)
    return None


def parse_birth_date(value: str) -> Optional[date]:
    """Parse DD/MM/YYYY, returning None for anything that is not a calendar date."""
    try:
        return datetime.strptime(value.strip(), BIRTH_DATE_FORMAT).date()
    except ValueError:
        return None


def check_birth_date(
    birth_date: str,
    today: Optional[date] = None,
) -> Optional[ValidationFailure]:
    """Optional field: must parse and must not be after today."""
    if not birth_date:
        return None

    parsed = parse_birth_date(birth_date)
    if parsed is None or parsed > (today or date.today()):
        return failure(FailureCode.BIRTH_DATE_INVALID, "birth_date")
    return None


def check_phone(phone: str) -> Optional[ValidationFailure]:
    """Optional field: 10 (landline) or 11 (mobile) digits."""
    if not phone:
        return None

    digits = strip_non_digits(phone)
    if not PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS:
        return failure(FailureCode.PHONE_INCOMPLETE, "phone")
    return None


def check_postal_code_length(postal_code: str) -> Optional[ValidationFailure]:
    """Exactly 8 digits when present."""
    if not postal_code:
        return None

    if len(strip_non_digits(postal_code)) != POSTAL_CODE_DIGITS:
        return failure(FailureCode.POSTAL_CODE_LENGTH, "postal_code")
    return None


def check_document(document: str) -> Optional[ValidationFailure]:
    if not is_valid_document(document):
        return failure(FailureCode.DOCUMENT_INVALID, "document")
    return None


def is_valid_email(email: str) -> bool:
    try:
        _EMAIL_ADAPTER.validate_python(email)
    except PydanticValidationError:
        return False
    return True


def check_email(email: str) -> Optional[ValidationFailure]:
    if not email or not is_valid_email(email):
        return failure(FailureCode.EMAIL_INVALID, "email")
    return None


def check_password(password: str) -> Optional[ValidationFailure]:
    if not PASSWORD_MIN_LENGTH <= len(password or "") <= PASSWORD_MAX_LENGTH:
        return failure(FailureCode.PASSWORD_LENGTH, "password")
    return None


def check_user_type(user_type: Optional[UserType]) -> Optional[ValidationFailure]:
    if user_type is None:
        return failure(FailureCode.USER_TYPE_REQUIRED, "user_type")
    return None


# ---------------------------------------------------------------------------
# Donation rules
# ---------------------------------------------------------------------------

def check_description(description: str) -> Optional[ValidationFailure]:
    if not description or not description.strip():
        return failure(FailureCode.DESCRIPTION_REQUIRED, "description")
    return None


def parse_quantity(value: str) -> Optional[int]:
    """Parse a typed quantity; only plain positive integers are accepted."""
    text = (value or "").strip()
    if not text.isascii() or not text.isdigit():
        return None
    quantity = int(text)
    return quantity if quantity > 0 else None


def check_quantity(quantity: str) -> Optional[ValidationFailure]:
    if parse_quantity(quantity) is None:
        return failure(FailureCode.QUANTITY_INVALID, "quantity")
    return None


def check_category(
    category_id: Optional[str],
    active_category_ids: Optional[Collection[str]] = None,
) -> Optional[ValidationFailure]:
    """
    A category must be selected; when the active set is given, it must be in it.

    The active set is only passed when creating a donation.
    """
    if not category_id:
        return failure(FailureCode.CATEGORY_REQUIRED, "category_id")

    if active_category_ids is not None and category_id not in active_category_ids:
        return failure(FailureCode.CATEGORY_INACTIVE, "category_id")
    return None


def check_required_postal_code(postal_code: str) -> Optional[ValidationFailure]:
    if not postal_code or not postal_code.strip():
        return failure(FailureCode.POSTAL_CODE_REQUIRED, "postal_code")
    return check_postal_code_length(postal_code)


def check_house_number(house_number: str) -> Optional[ValidationFailure]:
    if not house_number or not house_number.strip():
        return failure(FailureCode.HOUSE_NUMBER_REQUIRED, "house_number")
    return None


# ---------------------------------------------------------------------------
# Login rules
# ---------------------------------------------------------------------------

def check_credentials_present(email: str, password: str) -> Optional[ValidationFailure]:
    if not email:
        return failure(FailureCode.CREDENTIALS_REQUIRED, "email")
    if not password:
        return failure(FailureCode.CREDENTIALS_REQUIRED, "password")
    return None
