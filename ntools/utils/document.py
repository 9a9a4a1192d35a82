"""CPF and CNPJ check-digit validation."""

from __future__ import annotations

from typing import List, Optional

from .strings import only_numbers

_CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_CNPJ_WEIGHTS_2 = [6] + _CNPJ_WEIGHTS_1


def _all_same(digits: List[int]) -> bool:
    return len(set(digits)) == 1


def _cpf_digit(digits: List[int]) -> int:
    start = len(digits) + 1
    total = sum(d * w for d, w in zip(digits, range(start, 1, -1)))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def _cnpj_digit(digits: List[int], weights: List[int]) -> int:
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cpf(value: Optional[str]) -> bool:
    digits = [int(c) for c in only_numbers(value or "")]
    if len(digits) != 11 or _all_same(digits):
        return False
    first = _cpf_digit(digits[:9])
    second = _cpf_digit(digits[:9] + [first])
    return digits[9:] == [first, second]


def validate_cnpj(value: Optional[str]) -> bool:
    digits = [int(c) for c in only_numbers(value or "")]
    if len(digits) != 14 or _all_same(digits):
        return False
    first = _cnpj_digit(digits[:12], _CNPJ_WEIGHTS_1)
    second = _cnpj_digit(digits[:12] + [first], _CNPJ_WEIGHTS_2)
    return digits[12:] == [first, second]


def validate_cpf_or_cnpj(value: Optional[str]) -> bool:
    """Validate a CPF (11 digits) or CNPJ (14 digits); formatting is ignored."""
    digits = only_numbers(value or "")
    if len(digits) == 11:
        return validate_cpf(digits)
    if len(digits) == 14:
        return validate_cnpj(digits)
    return False
