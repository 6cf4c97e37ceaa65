"""Math calculators: modulo, percentages, LCM/HCF."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce

from ...utils.number_format import round_value


@dataclass(frozen=True)
class ModuloResult:
    dividend: float
    divisor: float
    remainder: float


@dataclass(frozen=True)
class PercentageResult:
    percentage: float
    total_value: float
    result_value: float


@dataclass(frozen=True)
class PercentageChangeResult:
    change: float
    change_type: str


@dataclass(frozen=True)
class LcmHcfResult:
    numbers: tuple[int, ...]
    lcm: int
    hcf: int


def calculate_modulo(dividend: float, divisor: float) -> ModuloResult:
    """Remainder of a truncating division; the sign follows the dividend."""
    if divisor == 0:
        raise ValueError("Divisor cannot be zero.")
    return ModuloResult(dividend=dividend, divisor=divisor, remainder=math.fmod(dividend, divisor))


def calculate_percentage(percentage: float, total_value: float) -> PercentageResult:
    result = (percentage / 100) * total_value
    return PercentageResult(percentage=percentage, total_value=total_value, result_value=round_value(result, 2))


def calculate_percentage_change(initial_value: float, final_value: float) -> PercentageChangeResult:
    if initial_value == 0:
        return PercentageChangeResult(change=math.inf if final_value > 0 else 0.0, change_type="increase")

    change = (final_value - initial_value) / initial_value * 100
    if change > 0:
        change_type = "increase"
    elif change < 0:
        change_type = "decrease"
    else:
        change_type = "no-change"
    return PercentageChangeResult(change=round_value(change, 2), change_type=change_type)


MAX_LIST_NUMBERS = 50
# Largest integer a float field represents exactly.
MAX_LIST_VALUE = 2**53 - 1


def parse_integer_list(raw: str) -> tuple[int, ...]:
    """Parse ``"12, 15, 75"``; raises ``ValueError`` unless there are two to fifty positive integers."""
    parts = [part.strip() for part in (raw or "").split(",") if part.strip()]
    if len(parts) > MAX_LIST_NUMBERS:
        raise ValueError(f"Please enter at most {MAX_LIST_NUMBERS} numbers.")
    numbers = []
    for part in parts:
        try:
            value = float(part)
        except ValueError:
            raise ValueError(f"{part!r} is not a number.") from None
        if not value.is_integer() or value <= 0:
            raise ValueError(f"{part!r} is not a positive integer.")
        if value > MAX_LIST_VALUE:
            raise ValueError(f"{part!r} is too large; numbers must be at most {MAX_LIST_VALUE}.")
        numbers.append(int(value))
    if len(numbers) < 2:
        raise ValueError("Please enter at least two comma-separated positive integers.")
    return tuple(numbers)


def calculate_lcm_hcf(numbers: tuple[int, ...]) -> LcmHcfResult:
    if len(numbers) < 2 or any(n <= 0 for n in numbers):
        raise ValueError("Please enter at least two comma-separated positive integers.")
    hcf = reduce(math.gcd, numbers)
    lcm = reduce(lambda a, b: a * b // math.gcd(a, b), numbers)
    return LcmHcfResult(numbers=tuple(numbers), lcm=lcm, hcf=hcf)
