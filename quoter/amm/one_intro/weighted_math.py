"""1DEX weighted pool math.

Core curve functions for a two-token slice of the weighted-value invariant.
The curve is evaluated in floating point and rounded back to integers in
the pool's favor: amounts paid out round down, amounts taken in round up.
"""

from quoter.constants import PONE
from quoter.errors import CalculationFailure
from quoter.math.float_bridge import RoundDirection, div, f64_to_u64_rounded, pow, u64_to_f64


def _check_weights(weight_in: int, weight_out: int) -> None:
    if weight_in <= 0:
        raise CalculationFailure("weight_in must be positive")
    if weight_out <= 0:
        raise CalculationFailure("weight_out must be positive")


def calc_out_given_in(
    balance_in: int,
    weight_in: int,
    balance_out: int,
    weight_out: int,
    amount_in: int,
    swap_fee: int = 0,
) -> int:
    """Calculate output amount for a given input (exact-in).

    Fee should be subtracted from amount_in BEFORE calling this function;
    the orchestrator always passes ``swap_fee=0``.

    Formula:
        amount_out = balance_out * (1 - (balance_in / (balance_in + amount_in * (1 - fee)))^(weight_in / weight_out))

    Args:
        balance_in: Pool balance of the input token
        weight_in: Weight of the input token (must be positive)
        balance_out: Pool balance of the output token
        weight_out: Weight of the output token (must be positive)
        amount_in: Input amount (after fee subtraction)
        swap_fee: Fee in parts per PONE applied inside the curve

    Returns:
        Output amount, rounded down

    Raises:
        CalculationFailure: On zero weights or a non-finite curve result
    """
    _check_weights(weight_in, weight_out)

    balance_in_f = u64_to_f64(balance_in)
    balance_out_f = u64_to_f64(balance_out)

    weight_ratio = div(u64_to_f64(weight_in), u64_to_f64(weight_out))
    adjusted_in = u64_to_f64(amount_in) * (1.0 - u64_to_f64(swap_fee) / PONE)
    y = div(balance_in_f, balance_in_f + adjusted_in)

    amount_out = balance_out_f * (1.0 - pow(y, weight_ratio))
    return f64_to_u64_rounded(amount_out, RoundDirection.FLOOR)


def calc_in_given_out(
    balance_in: int,
    weight_in: int,
    balance_out: int,
    weight_out: int,
    amount_out: int,
    swap_fee: int = 0,
) -> int:
    """Calculate input amount for a given output (exact-out).

    Fee should be added to the result AFTER calling this function;
    the orchestrator always passes ``swap_fee=0``.

    Formula:
        amount_in = balance_in * ((balance_out / (balance_out - amount_out))^(weight_out / weight_in) - 1) / (1 - fee)

    Args:
        balance_in: Pool balance of the input token
        weight_in: Weight of the input token (must be positive)
        balance_out: Pool balance of the output token
        weight_out: Weight of the output token (must be positive)
        amount_out: Desired output amount
        swap_fee: Fee in parts per PONE applied inside the curve

    Returns:
        Input amount (before fee addition), rounded up

    Raises:
        CalculationFailure: On zero weights, if amount_out >= balance_out, or if
            the curve result is not a finite u64
    """
    _check_weights(weight_in, weight_out)

    # Draining the whole output reserve needs an infinite input
    if amount_out >= balance_out:
        raise CalculationFailure(
            f"amount_out {amount_out} must be less than balance_out {balance_out}"
        )

    balance_out_f = u64_to_f64(balance_out)

    weight_ratio = div(u64_to_f64(weight_out), u64_to_f64(weight_in))
    y = div(balance_out_f, balance_out_f - u64_to_f64(amount_out))
    ratio = pow(y, weight_ratio) - 1.0

    amount_in = div(u64_to_f64(balance_in) * ratio, 1.0 - u64_to_f64(swap_fee) / PONE)
    return f64_to_u64_rounded(amount_in, RoundDirection.CEILING)
