"""Bridge between the u64 token-amount domain and floating point.

The weighted invariant has no closed-form integer solution for arbitrary
weights, so the curve is evaluated in IEEE-754 doubles. Everything that
crosses back into integers goes through f64_to_u64_rounded with an explicit
rounding direction.
"""

from __future__ import annotations

import math
from enum import Enum

from quoter.errors import CalculationFailure
from quoter.safe_int import U64_MAX


class RoundDirection(Enum):
    """Which way a float result is rounded back to an integer."""

    FLOOR = "floor"
    CEILING = "ceiling"


def u64_to_f64(value: int) -> float:
    """Convert an integer amount to float (lossy above 2^53)."""
    return float(value)


def f64_to_u64_rounded(value: float, rounding: RoundDirection) -> int:
    """Round a float to a u64 in the requested direction.

    Raises:
        CalculationFailure: If value is NaN, infinite, negative after rounding
            or larger than u64
    """
    if not math.isfinite(value):
        raise CalculationFailure(f"Non-finite curve result: {value}")

    rounded = math.floor(value) if rounding is RoundDirection.FLOOR else math.ceil(value)

    if rounded < 0 or rounded > U64_MAX:
        raise CalculationFailure(f"Curve result {value} is outside u64 range")
    return rounded


def div(left: float, right: float) -> float:
    """Float division that raises CalculationFailure instead of ZeroDivisionError."""
    if right == 0.0:
        raise CalculationFailure(f"Division by zero: {left} / 0")
    return left / right


def pow(base: float, exponent: float) -> float:  # noqa: A001 - mirrors math.pow
    """Float power that raises CalculationFailure on overflow or non-finite results."""
    try:
        result = math.pow(base, exponent)
    except (OverflowError, ValueError) as e:
        raise CalculationFailure(f"pow({base}, {exponent}) failed: {e}") from e
    if not math.isfinite(result):
        raise CalculationFailure(f"pow({base}, {exponent}) is not finite")
    return result
