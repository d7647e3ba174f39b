"""1DEX weighted pool implementation.

This package provides quoting for 1DEX weighted pools:
- Curve math (out given in / in given out) in floating point with
  pool-favoring rounding
- Swap orchestration (fee handling, leg selection, liquidity guard)
- Pool state model and account layout codec
- OneIntroAmm adapter
"""

# Adapter
from .amm import OneIntroAmm, fee_pct_from_ratio, get_associated_token_address

# Account layout
from .layout import (
    POOL_STATE_DISCRIMINATOR,
    PoolStateLayout,
    decode_pool_account,
    decode_pool_state,
    encode_pool_account,
    encode_pool_state,
)

# State dataclasses
from .state import PoolState, TokenRecord

# Swap orchestration
from .swap import SwapAmounts, SwapLegs, select_legs, swap_exact_amount_in, swap_exact_amount_out

# Curve math
from .weighted_math import calc_in_given_out, calc_out_given_in

__all__ = [
    # Adapter
    "OneIntroAmm",
    "fee_pct_from_ratio",
    "get_associated_token_address",
    # Layout
    "POOL_STATE_DISCRIMINATOR",
    "PoolStateLayout",
    "decode_pool_account",
    "decode_pool_state",
    "encode_pool_account",
    "encode_pool_state",
    # State
    "PoolState",
    "TokenRecord",
    # Swap
    "SwapAmounts",
    "SwapLegs",
    "select_legs",
    "swap_exact_amount_in",
    "swap_exact_amount_out",
    # Math
    "calc_in_given_out",
    "calc_out_given_in",
]
