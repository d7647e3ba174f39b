"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Mints and deterministic account keys
- factories: Pool state, keyed account and adapter factories
"""

from tests.helpers.constants import (
    LP_MINT,
    POOL_AUTHORITY,
    POOL_KEY,
    UNKNOWN_MINT,
    USDC,
    USDT,
    USER,
    USER_DESTINATION,
    USER_SOURCE,
    VAULT_0,
    VAULT_1,
    VAULT_2,
    WSOL,
)
from tests.helpers.factories import make_amm, make_keyed_account, make_pool_state

__all__ = [
    # Constants
    "USDC",
    "USDT",
    "WSOL",
    "POOL_KEY",
    "POOL_AUTHORITY",
    "LP_MINT",
    "VAULT_0",
    "VAULT_1",
    "VAULT_2",
    "USER",
    "USER_SOURCE",
    "USER_DESTINATION",
    "UNKNOWN_MINT",
    # Factories
    "make_pool_state",
    "make_keyed_account",
    "make_amm",
]
