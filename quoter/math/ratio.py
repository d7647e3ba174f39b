"""Exact proportional scaling of u64 amounts.

Fee extraction and liquidity-guard thresholds are settlement-critical, so
they never touch floating point.
"""

from __future__ import annotations

from quoter.errors import CalculationFailure
from quoter.safe_int import S, SafeIntError


def proportional(amount: int, numerator: int, denominator: int) -> int:
    """Compute floor(amount * numerator / denominator) with a u128 intermediate.

    Args:
        amount: u64 value to scale
        numerator: u64 scale numerator
        denominator: u64 scale denominator. Zero means "no scaling".

    Returns:
        The scaled amount as u64 (``amount`` unchanged if denominator is 0)

    Raises:
        CalculationFailure: If an input is not a u64, the product does not fit
            in u128, or the result does not fit back into u64
    """
    if denominator == 0:
        return amount

    try:
        for value in (amount, numerator, denominator):
            S(value).to_u64()
        product = (S(amount) * S(numerator)).to_u128()
        return (S(product) // S(denominator)).to_u64()
    except SafeIntError as e:
        raise CalculationFailure(
            f"proportional({amount}, {numerator}, {denominator}) failed: {e}"
        ) from e


def value_from_shares(shares: int, total_value: int, total_shares: int) -> int:
    """Value of ``shares`` out of ``total_shares`` of something worth ``total_value``."""
    return proportional(shares, total_value, total_shares)
