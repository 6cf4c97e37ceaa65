"""Number parsing and display helpers shared by the calculators and templates."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

__all__ = [
    "parse_number",
    "round_value",
    "format_number",
    "format_inr",
    "format_hours",
]


def parse_number(raw) -> float | None:
    """Parse a field value into a finite float, or ``None`` when it is not a number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def _quantize(value: Decimal, decimals: int) -> Decimal:
    # The default 28-digit context overflows once integer digits plus decimals exceed it.
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def round_value(value, decimals=3):
    """Round value with protection against floating point precision issues"""
    if value is None:
        return None
    if not math.isfinite(value):
        return value
    return float(_quantize(Decimal(str(value)), decimals))


def format_number(value, decimals: int | None = None) -> str:
    """Render a number without trailing zeros (``2.50`` -> ``2.5``, ``100.0`` -> ``100``)."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if decimals is not None:
        value = round_value(float(value), decimals)
    if value == 0:
        return "0"
    try:
        normalized = Decimal(repr(value) if isinstance(value, float) else str(value)).normalize()
    except InvalidOperation:
        return str(value)
    return format(normalized, "f")


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(value) -> str:
    """Format an amount as Indian Rupees with lakh/crore grouping and up to two decimals."""
    if value is None:
        return "₹0"
    amount = round_value(float(value), 2)
    sign = "-" if amount < 0 else ""
    if math.isinf(amount):
        return f"{sign}₹Infinity"
    text = format(_quantize(Decimal(str(abs(amount))), 2), "f")
    whole, fraction = text.split(".")
    fraction = fraction.rstrip("0")
    rendered = _group_indian(whole)
    if fraction:
        rendered = f"{rendered}.{fraction}"
    return f"{sign}₹{rendered}"


def format_hours(hours: float) -> str:
    """Render a duration in hours as ``"1 hour 40 minutes"``."""
    whole = math.floor(hours)
    minutes = math.floor((hours - whole) * 60 + 0.5)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    parts = []
    if whole > 0:
        parts.append(f"{whole} hour{'s' if whole > 1 else ''}")
    if minutes > 0:
        parts.append(f"{minutes} minute{'s' if minutes > 1 else ''}")
    return " ".join(parts) or "0 minutes"
