"""Quoter configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class QuoterConfig:
    """Centralized configuration for quote serving.

    The pool adapter itself only flags guard-exceeding trades; what to do
    with the flag is a policy of the serving layer.

    Attributes:
        reject_not_enough_liquidity: If True, quotes that trip the 50%
            liquidity guard are rejected. If False (default), they are
            returned with ``notEnoughLiquidity`` set.
    """

    reject_not_enough_liquidity: bool = False

    @classmethod
    def from_env(cls) -> QuoterConfig:
        """Build configuration from environment variables.

        - QUOTER_REJECT_NOT_ENOUGH_LIQUIDITY: reject guard-exceeding quotes (default: false)
        """
        reject = os.environ.get("QUOTER_REJECT_NOT_ENOUGH_LIQUIDITY", "false").lower()
        return cls(reject_not_enough_liquidity=reject in _TRUTHY)


# Default configuration instance
DEFAULT_QUOTER_CONFIG = QuoterConfig()
