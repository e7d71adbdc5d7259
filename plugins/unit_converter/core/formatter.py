"""Canonical display formatting for conversion results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

DECIMALS = 6
SCIENTIFIC_BELOW = 1e-4
SCIENTIFIC_ABOVE = 9_999_999


def _round_at(value: Decimal, exponent: int) -> Decimal:
    # Ties go away from zero, so 0.0078125 shows as 0.007813.
    return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


def _scientific(value: float) -> str:
    exact = Decimal(value)
    exponent = exact.adjusted()
    rounded = _round_at(exact, exponent - DECIMALS)
    if rounded.adjusted() > exponent:
        rounded = _round_at(rounded, rounded.adjusted() - DECIMALS)
    mantissa, exponent_text = f"{rounded:.{DECIMALS}e}".split("e")
    return f"{mantissa}e{int(exponent_text):+d}"


def _fixed(value: float) -> str:
    rounded = _round_at(Decimal(value), -DECIMALS)
    return f"{rounded:f}".rstrip("0").rstrip(".")


def format_value(value: float | int) -> str:
    """Render ``value`` as a display string.

    Integral values print without a decimal point. Magnitudes below ``1e-4`` or
    above ``9_999_999`` use exponential notation with six mantissa decimals
    (``1.234000e-5``). Everything else is rounded to six decimals with trailing
    zeros removed. Rounding uses the exact binary value and breaks ties away
    from zero.
    """

    if isinstance(value, int):
        return str(int(value))
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    if value.is_integer():
        return str(int(value))
    magnitude = abs(value)
    if magnitude < SCIENTIFIC_BELOW or magnitude > SCIENTIFIC_ABOVE:
        return _scientific(value)
    return _fixed(value)


__all__ = ["DECIMALS", "SCIENTIFIC_ABOVE", "SCIENTIFIC_BELOW", "format_value"]
