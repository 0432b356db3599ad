"""
Formatting module.

Pure masking functions applied to raw keystrokes.

Public API:
- format_document: CPF/CNPJ mask
- format_postal_code: CEP mask
- format_phone: landline/mobile mask
- format_date_input: DD/MM/YYYY mask
- strip_non_digits: shared normalization step
"""

from .masks import (
    format_document,
    format_postal_code,
    format_phone,
    format_date_input,
    strip_non_digits,
)

__all__ = [
    "format_document",
    "format_postal_code",
    "format_phone",
    "format_date_input",
    "strip_non_digits",
]
