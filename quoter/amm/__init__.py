"""Pool adapter implementations."""

from quoter.amm.base import (
    Account,
    AccountMap,
    Amm,
    KeyedAccount,
    Quote,
    QuoteParams,
    Swap,
    SwapAndAccountMetas,
    SwapMode,
    SwapParams,
)
from quoter.amm.loader import AMM_REGISTRY, amm_factory
from quoter.amm.one_intro import OneIntroAmm

__all__ = [
    # Base classes and types
    "Amm",
    "Account",
    "AccountMap",
    "KeyedAccount",
    "Quote",
    "QuoteParams",
    "Swap",
    "SwapAndAccountMetas",
    "SwapMode",
    "SwapParams",
    # 1DEX
    "OneIntroAmm",
    # Loader
    "AMM_REGISTRY",
    "amm_factory",
]
