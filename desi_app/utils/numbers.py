"""
Numeric helpers for validating and rounding untrusted values.

Booleans are ints in Python but never count as numbers here, and NaN is
rejected everywhere a number is required.
"""

import math
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Any

# Enough digits for the exact expansion of any finite double
_PRECISION = 1100
_HALF = Decimal("0.5")


def is_number(value: Any) -> bool:
    """Return True for real, non-boolean, non-NaN numbers."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def is_positive_number(value: Any) -> bool:
    """Return True for numbers strictly greater than zero."""
    return is_number(value) and value > 0


def is_within(value: Any, lower: float, upper: float) -> bool:
    """Return True for numbers inside the closed interval [lower, upper]."""
    return is_number(value) and lower <= value <= upper


def round_half_up(value: float) -> float:
    """
    Round to the nearest integer, with halves going towards positive infinity.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    would shift averages that land exactly on a half. The sum is taken on the
    exact decimal expansion of the float, so values just below a half and odd
    integers above 2**52 are not disturbed by binary addition.

    Args:
        value: Number to round

    Returns:
        Nearest integer, 2.5 -> 3 and -2.5 -> -2. Infinities come back unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return int((Decimal(value) + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def round_places(value: float, places: int = 2) -> float:
    """
    Round to a fixed number of decimal places, halves away from zero.

    Works on the exact decimal value of the float: 0.125 -> 0.13 while
    1.005 (stored as 1.00499...) -> 1.0.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(value).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP))
