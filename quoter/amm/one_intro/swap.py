"""1DEX swap orchestration.

Leg selection, fee arithmetic around the curve functions, and the
liquidity-ratio guard. Fees never enter the curve itself: the curve
functions are always called with ``swap_fee=0``.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from solders.pubkey import Pubkey

from quoter.constants import MAX_IN_RATIO, MAX_OUT_RATIO, PONE
from quoter.errors import CalculationFailure, UnknownMintError
from quoter.math.ratio import value_from_shares
from quoter.safe_int import S, Underflow

from .state import PoolState, TokenRecord
from .weighted_math import calc_in_given_out, calc_out_given_in

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapLegs:
    """The two token records taking part in a swap."""

    token_in: TokenRecord
    token_out: TokenRecord


@dataclass(frozen=True)
class SwapAmounts:
    """Result of a swap calculation.

    Attributes:
        in_amount: Amount the trader pays, fee included
        out_amount: Amount the trader receives
        fee_amount: Fee portion of in_amount (input token)
        not_enough_liquidity: True if the trade moves more than 50% of the
            relevant reserve. Informational; the quote is still returned.
    """

    in_amount: int
    out_amount: int
    fee_amount: int
    not_enough_liquidity: bool


def select_legs(state: PoolState, input_mint: Pubkey) -> SwapLegs:
    """Pick (input, output) legs from the pool's first two tokens.

    Raises:
        UnknownMintError: If input_mint is neither leg 0 nor leg 1
    """
    record_0, record_1 = state.tokens[0], state.tokens[1]

    if input_mint == record_0.mint:
        return SwapLegs(token_in=record_0, token_out=record_1)
    if input_mint == record_1.mint:
        return SwapLegs(token_in=record_1, token_out=record_0)

    logger.warning(
        "one_intro_unknown_input_mint",
        input_mint=str(input_mint),
        mint_0=str(record_0.mint),
        mint_1=str(record_1.mint),
    )
    raise UnknownMintError(f"Mint {input_mint} is not tradable in this pool")


def swap_exact_amount_in(
    token_in_balance: int,
    token_in_weight: int,
    token_out_balance: int,
    token_out_weight: int,
    token_in_amount: int,
    swap_fee_ratio: int,
) -> SwapAmounts:
    """Quote an exact-in swap.

    The fee is carved out of the stated input, so ``in_amount`` equals the
    requested amount and only ``in_amount - fee`` reaches the curve.

    Raises:
        CalculationFailure: If swap_fee_ratio >= PONE, or any integer or curve
            step fails
    """
    if swap_fee_ratio >= PONE:
        raise CalculationFailure(f"Swap fee ratio {swap_fee_ratio} must be below {PONE}")

    max_token_in_amount = value_from_shares(MAX_IN_RATIO, token_in_balance, PONE)

    swap_fee_amount = value_from_shares(swap_fee_ratio, token_in_amount, PONE)
    try:
        adjusted_token_in_amount = (S(token_in_amount) - S(swap_fee_amount)).value
    except Underflow as e:
        raise CalculationFailure(f"token_in_amount underflow: {e}") from e

    token_out_amount = calc_out_given_in(
        token_in_balance,
        token_in_weight,
        token_out_balance,
        token_out_weight,
        adjusted_token_in_amount,
        0,
    )

    return SwapAmounts(
        in_amount=token_in_amount,
        out_amount=token_out_amount,
        fee_amount=swap_fee_amount,
        not_enough_liquidity=token_in_amount > max_token_in_amount,
    )


def swap_exact_amount_out(
    token_in_balance: int,
    token_in_weight: int,
    token_out_balance: int,
    token_out_weight: int,
    token_out_amount: int,
    swap_fee_ratio: int,
) -> SwapAmounts:
    """Quote an exact-out swap.

    The curve gives the net input; it is then grossed up so that deducting
    the fee from ``in_amount`` leaves that net input.

    Raises:
        CalculationFailure: If swap_fee_ratio >= PONE, or any integer or curve
            step fails
    """
    max_token_out_amount = value_from_shares(MAX_OUT_RATIO, token_out_balance, PONE)

    net_token_in_amount = calc_in_given_out(
        token_in_balance,
        token_in_weight,
        token_out_balance,
        token_out_weight,
        token_out_amount,
        0,
    )

    fee_complement = S(PONE).checked_sub(swap_fee_ratio)
    if fee_complement is None or not fee_complement:
        raise CalculationFailure(f"Swap fee ratio {swap_fee_ratio} must be below {PONE}")

    token_in_amount = value_from_shares(PONE, net_token_in_amount, fee_complement.value)
    try:
        swap_fee_amount = (S(token_in_amount) - S(net_token_in_amount)).value
    except Underflow as e:
        raise CalculationFailure(f"adjusted token_in_amount underflow: {e}") from e

    return SwapAmounts(
        in_amount=token_in_amount,
        out_amount=token_out_amount,
        fee_amount=swap_fee_amount,
        not_enough_liquidity=token_out_amount > max_token_out_amount,
    )
