"""Pytest configuration and fixtures."""

import pytest

from quoter.amm.one_intro import OneIntroAmm, PoolState
from tests.helpers import make_amm, make_pool_state


@pytest.fixture
def equal_pool_state() -> PoolState:
    """USDC/USDT pool, 100_000 each, equal weights, no fee."""
    return make_pool_state()


@pytest.fixture
def amm(equal_pool_state: PoolState) -> OneIntroAmm:
    """Adapter loaded from the equal pool's account bytes."""
    return make_amm(equal_pool_state)
