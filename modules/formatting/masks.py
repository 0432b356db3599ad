"""
Input masks for documents, postal codes, phone numbers and dates.

Every function strips non-digit characters first, then re-inserts the
separators positionally, so partially typed input is masked incrementally.
The functions never reject input and are idempotent under their own mask.
"""

import re

_NON_DIGIT = re.compile(r"\D", re.ASCII)

CPF_MASK_LENGTH = 14    # 000.000.000-00
CNPJ_MASK_LENGTH = 18   # 00.000.000/0000-00
POSTAL_CODE_MASK_LENGTH = 9   # 00000-000
LANDLINE_MASK_LENGTH = 14     # (00) 0000-0000
MOBILE_MASK_LENGTH = 15       # (00) 00000-0000
DATE_MASK_LENGTH = 10         # DD/MM/YYYY


def strip_non_digits(value: str | None) -> str:
    """Remove everything but ASCII digits."""
    return _NON_DIGIT.sub("", value or "")


def _insert(pattern: str, replacement: str, value: str) -> str:
    # Only the first match, so each step places exactly one separator
    return re.sub(pattern, replacement, value, count=1, flags=re.ASCII)


def format_document(raw: str | None) -> str:
    """
    Mask a CPF or CNPJ.

    Up to 11 digits are treated as a CPF (000.000.000-00); anything longer
    as a CNPJ (00.000.000/0000-00). Checksums are not validated here.
    """
    digits = strip_non_digits(raw)

    if len(digits) <= 11:
        value = _insert(r"(\d{3})(\d)", r"\1.\2", digits)
        value = _insert(r"(\d{3})(\d)", r"\1.\2", value)
        value = _insert(r"(\d{3})(\d{1,2})", r"\1-\2", value)
        return value[:CPF_MASK_LENGTH]

    value = _insert(r"(\d{2})(\d)", r"\1.\2", digits)
    value = _insert(r"(\d{3})(\d)", r"\1.\2", value)
    value = _insert(r"(\d{3})(\d)", r"\1/\2", value)
    value = _insert(r"(\d{4})(\d{1,2})", r"\1-\2", value)
    return value[:CNPJ_MASK_LENGTH]


def format_postal_code(raw: str | None) -> str:
    """Mask a CEP as 00000-000."""
    value = _insert(r"(\d{5})(\d)", r"\1-\2", strip_non_digits(raw))
    return value[:POSTAL_CODE_MASK_LENGTH]


def format_phone(raw: str | None) -> str:
    """
    Mask a Brazilian phone number.

    10 digits give (00) 0000-0000, 11 digits give (00) 00000-0000.
    """
    digits = strip_non_digits(raw)
    value = _insert(r"(\d{2})(\d)", r"(\1) \2", digits)

    if len(digits) <= 10:
        value = _insert(r"(\d{4})(\d)", r"\1-\2", value)
        return value[:LANDLINE_MASK_LENGTH]

    value = _insert(r"(\d{5})(\d)", r"\1-\2", value)
    return value[:MOBILE_MASK_LENGTH]


def format_date_input(raw: str | None) -> str:
    """Build DD/MM/YYYY as digits are typed. Calendar validity is not checked."""
    value = _insert(r"(\d{2})(\d)", r"\1/\2", strip_non_digits(raw))
    value = _insert(r"(\d{2})(\d)", r"\1/\2", value)
    return value[:DATE_MASK_LENGTH]
