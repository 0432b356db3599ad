"""
Checksum validation for Brazilian tax identifiers.

CPF (11 digits) and CNPJ (14 digits) both use mod-11 check digits with
different weight sequences. Inputs may be masked; non-digits are ignored.
"""

from modules.formatting import strip_non_digits

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_CNPJ_WEIGHTS_2 = [6] + _CNPJ_WEIGHTS_1


def _check_digit(nums: list[int], weights: list[int]) -> int:
    remainder = sum(n * w for n, w in zip(nums, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    """Validate the two CPF check digits (mod-11, weights 10..2 and 11..2)."""
    digits = strip_non_digits(value)
    if len(digits) != CPF_LENGTH:
        return False

    # Repeated digits pass the arithmetic but are not issued
    if digits == digits[0] * CPF_LENGTH:
        return False

    nums = [int(d) for d in digits]
    d1 = _check_digit(nums[:9], list(range(10, 1, -1)))
    d2 = _check_digit(nums[:10], list(range(11, 1, -1)))
    return nums[9] == d1 and nums[10] == d2


def is_valid_cnpj(value: str) -> bool:
    """Validate the two CNPJ check digits (mod-11, weights 5..2,9..2)."""
    digits = strip_non_digits(value)
    if len(digits) != CNPJ_LENGTH:
        return False

    if digits == digits[0] * CNPJ_LENGTH:
        return False

    nums = [int(d) for d in digits]
    d1 = _check_digit(nums[:12], _CNPJ_WEIGHTS_1)
    d2 = _check_digit(nums[:13], _CNPJ_WEIGHTS_2)
    return nums[12] == d1 and nums[13] == d2


def is_valid_document(value: str) -> bool:
    """
    Validate a CPF or CNPJ, picking the algorithm by digit count.

    Any length other than 11 or 14 is invalid.
    """
    digits = strip_non_digits(value)
    if len(digits) == CPF_LENGTH:
        return is_valid_cpf(digits)
    if len(digits) == CNPJ_LENGTH:
        return is_valid_cnpj(digits)
    return False
