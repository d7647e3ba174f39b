"""1DEX pool adapter.

Wraps one 1DEX pool account: decoding, refresh, quoting and the account
list for executing a swap.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from solders.instruction import AccountMeta
from solders.pubkey import Pubkey

from quoter.amm.base import (
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
from quoter.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    ONE_INTRO_LABEL,
    ONE_INTRO_METADATA_STATE,
    ONE_INTRO_TOKEN_AUTH_PDA,
    TOKEN_PROGRAM_ID,
)
from quoter.errors import StateNotFound, TooSmallTokenInAmountError, TooSmallTokenOutAmountError

from .layout import decode_pool_account
from .state import PoolState
from .swap import select_legs, swap_exact_amount_in, swap_exact_amount_out

logger = structlog.get_logger()

FEE_PCT_SCALE = 9


def get_associated_token_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """Derive the SPL associated token account of ``owner`` for ``mint``."""
    address, _bump = Pubkey.find_program_address(
        [bytes(owner), bytes(TOKEN_PROGRAM_ID), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )
    return address


def fee_pct_from_ratio(swap_fee_ratio: int) -> Decimal:
    """Fee ratio in parts per PONE as an exact decimal fraction (e.g. 3_000_000 -> 0.003)."""
    return Decimal(swap_fee_ratio).scaleb(-FEE_PCT_SCALE)


class OneIntroAmm(Amm):
    """1DEX weighted pool adapter.

    Holds a reference to an immutable PoolState. update() decodes the new
    snapshot fully before rebinding it, so a failed update leaves the old
    state in place. A quote() running concurrently with update() on the same
    instance may observe either snapshot; use clone_amm() to pin one.
    """

    def __init__(self, key: Pubkey, program_id: Pubkey, state: PoolState) -> None:
        self._key = key
        self._program_id = program_id
        self._state = state

    @classmethod
    def from_keyed_account(cls, keyed_account: KeyedAccount) -> OneIntroAmm:
        """Build an adapter from a pool account.

        Raises:
            PoolDecodeError: If the account data is not a 1DEX pool state
        """
        state = decode_pool_account(keyed_account.account.data)
        logger.debug(
            "one_intro_pool_loaded",
            pool=str(keyed_account.key),
            token_count=state.token_count,
            swap_fee_ratio=state.swap_fee_ratio,
        )
        return cls(keyed_account.key, keyed_account.account.owner, state)

    @property
    def key(self) -> Pubkey:
        return self._key

    @property
    def label(self) -> str:
        return ONE_INTRO_LABEL

    @property
    def program_id(self) -> Pubkey:
        return self._program_id

    @property
    def state(self) -> PoolState:
        """Current pool snapshot."""
        return self._state

    def clone_amm(self) -> OneIntroAmm:
        return OneIntroAmm(self._key, self._program_id, self._state)

    def get_reserve_mints(self) -> list[Pubkey]:
        return [token.mint for token in self._state.active_tokens]

    def get_accounts_to_update(self) -> list[Pubkey]:
        return [self._key]

    def update(self, account_map: AccountMap) -> None:
        """Replace the snapshot with the refreshed pool account.

        Raises:
            StateNotFound: If the pool account is missing from account_map
            PoolDecodeError: If the refreshed data cannot be decoded
        """
        account = account_map.get(self._key)
        if account is None:
            logger.warning("one_intro_state_not_found", pool=str(self._key))
            raise StateNotFound(f"Pool state not found: {self._key}")

        self._state = decode_pool_account(account.data)
        logger.info("one_intro_state_updated", pool=str(self._key))

    def quote(self, quote_params: QuoteParams) -> Quote:
        """Quote a trade between leg 0 and leg 1.

        Raises:
            TooSmallTokenInAmountError: If the requested amount is not positive
            TooSmallTokenOutAmountError: If the trade would pay out nothing
            UnknownMintError: If the input mint is not one of the two legs
            CalculationFailure: If the curve or fee arithmetic fails
        """
        if quote_params.amount <= 0:
            raise TooSmallTokenInAmountError(
                f"Trade amount must be positive, got {quote_params.amount}"
            )

        state = self._state
        legs = select_legs(state, quote_params.input_mint)
        swap_fn = (
            swap_exact_amount_in
            if quote_params.swap_mode is SwapMode.EXACT_IN
            else swap_exact_amount_out
        )
        amounts = swap_fn(
            legs.token_in.balance,
            legs.token_in.weight,
            legs.token_out.balance,
            legs.token_out.weight,
            quote_params.amount,
            state.swap_fee_ratio,
        )

        if amounts.out_amount <= 0:
            raise TooSmallTokenOutAmountError(
                f"Output amount is zero for {quote_params.swap_mode.value} {quote_params.amount}"
            )

        logger.debug(
            "one_intro_quote",
            pool=str(self._key),
            swap_mode=quote_params.swap_mode.value,
            input_mint=str(quote_params.input_mint),
            in_amount=amounts.in_amount,
            out_amount=amounts.out_amount,
            fee_amount=amounts.fee_amount,
            not_enough_liquidity=amounts.not_enough_liquidity,
        )

        return Quote(
            in_amount=amounts.in_amount,
            out_amount=amounts.out_amount,
            fee_amount=amounts.fee_amount,
            fee_mint=quote_params.input_mint,
            fee_pct=fee_pct_from_ratio(state.swap_fee_ratio),
            not_enough_liquidity=amounts.not_enough_liquidity,
        )

    def get_swap_and_account_metas(self, swap_params: SwapParams) -> SwapAndAccountMetas:
        """Ordered accounts for the 1DEX swap instruction.

        Raises:
            UnknownMintError: If the source mint is not one of the two legs
        """
        state = self._state
        legs = select_legs(state, swap_params.source_mint)

        metadata_swap_fee_account = get_associated_token_address(
            ONE_INTRO_TOKEN_AUTH_PDA, swap_params.source_mint
        )

        return SwapAndAccountMetas(
            swap=Swap.TOKEN_SWAP,
            account_metas=[
                AccountMeta(ONE_INTRO_METADATA_STATE, is_signer=False, is_writable=False),
                AccountMeta(self._key, is_signer=False, is_writable=True),
                AccountMeta(state.authority, is_signer=False, is_writable=False),
                AccountMeta(legs.token_in.account, is_signer=False, is_writable=True),
                AccountMeta(legs.token_out.account, is_signer=False, is_writable=True),
                AccountMeta(swap_params.token_transfer_authority, is_signer=True, is_writable=True),
                AccountMeta(swap_params.source_token_account, is_signer=False, is_writable=True),
                AccountMeta(
                    swap_params.destination_token_account, is_signer=False, is_writable=True
                ),
                AccountMeta(metadata_swap_fee_account, is_signer=False, is_writable=True),
                # Referrer slot; the pool account stands in when there is no referrer
                AccountMeta(self._key, is_signer=False, is_writable=True),
                AccountMeta(TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
            ],
        )
