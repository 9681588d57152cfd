"""Math helpers: signed power, number formatting. No engine imports."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def sign(value: float) -> float:
    """-1.0, 0.0 or 1.0. Zero maps to zero (unlike math.copysign)."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def signed_pow(value: float, exponent: float) -> float:
    """sign(v) * |v|^exponent. Keeps the lobe direction while reshaping it."""
    return sign(value) * math.pow(abs(value), exponent)


def to_fixed(value: float, digits: int = 2) -> str:
    """Fixed-point text with ``digits`` decimals.

    Rounds the exact binary value, ties away from zero, so 0.125 -> "0.13"
    (plain ``format(0.125, ".2f")`` gives "0.12"). Negative zero prints as "0.00".
    """
    if value == 0:
        value = 0.0
    quantum = _CENTS if digits == 2 else Decimal(1).scaleb(-digits)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def format_number(value: float) -> str:
    """Shortest text for a number: 120.0 -> "120", 120.5 -> "120.5"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
