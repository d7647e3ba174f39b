"""Pool adapter loader.

Maps the program that owns a pool account to the adapter class that
understands it. The set of supported programs is closed: adding a venue
means adding an entry to AMM_REGISTRY.
"""

from __future__ import annotations

import structlog
from solders.pubkey import Pubkey

from quoter.amm.base import Amm, KeyedAccount
from quoter.amm.one_intro import OneIntroAmm
from quoter.constants import ONE_INTRO_PROGRAM_ID
from quoter.errors import UnsupportedPoolError

logger = structlog.get_logger()

AMM_REGISTRY: dict[Pubkey, type[Amm]] = {
    ONE_INTRO_PROGRAM_ID: OneIntroAmm,
}


def amm_factory(keyed_account: KeyedAccount) -> Amm:
    """Build the adapter for a pool account based on its owning program.

    Args:
        keyed_account: Pool account and its address

    Returns:
        Adapter instance for the pool

    Raises:
        UnsupportedPoolError: If no adapter is registered for the owner
        PoolDecodeError: If the adapter cannot decode the account
    """
    owner = keyed_account.account.owner
    amm_cls = AMM_REGISTRY.get(owner)
    if amm_cls is None:
        logger.warning(
            "amm_unsupported_pool",
            pool=str(keyed_account.key),
            owner=str(owner),
        )
        raise UnsupportedPoolError(f"Unsupported pool {keyed_account.key}, from owner {owner}")
    return amm_cls.from_keyed_account(keyed_account)
