"""1DEX pool state dataclasses.

Immutable snapshot of one pool account at a given moment.
"""

from __future__ import annotations

from dataclasses import dataclass

from solders.pubkey import Pubkey

from quoter.constants import MAX_TOKEN_COUNT, NULL_MINT


@dataclass(frozen=True)
class TokenRecord:
    """One token leg of a pool.

    Attributes:
        mint: Token mint (all-zero key for an unused slot)
        account: Pool's custody token account for this mint
        balance: Reserve in the token's native units (u64)
        weight: Invariant weight, compared against the other legs (u64)
    """

    mint: Pubkey
    account: Pubkey
    balance: int
    weight: int

    @property
    def is_active(self) -> bool:
        """False for placeholder slots with the null mint."""
        return self.mint != NULL_MINT


@dataclass(frozen=True)
class PoolState:
    """1DEX weighted pool state.

    Only the first ``token_count`` entries of ``tokens`` are meaningful.

    Attributes:
        authority: Pool authority PDA
        authority_bump: Bump seed of the authority PDA
        lp_mint: LP share token mint
        lp_virtual_supply: LP share accounting supply
        token_count: Number of active token legs
        tokens: Fixed-capacity token array (MAX_TOKEN_COUNT entries)
        total_weight: Sum of active leg weights
        swap_fee_ratio: Swap fee in parts per PONE (10^9)
    """

    authority: Pubkey
    authority_bump: int
    lp_mint: Pubkey
    lp_virtual_supply: int
    token_count: int
    tokens: tuple[TokenRecord, ...]
    total_weight: int
    swap_fee_ratio: int

    def __post_init__(self) -> None:
        if len(self.tokens) != MAX_TOKEN_COUNT:
            raise ValueError(
                f"PoolState requires exactly {MAX_TOKEN_COUNT} token records, got {len(self.tokens)}"
            )

    @property
    def active_tokens(self) -> tuple[TokenRecord, ...]:
        """Meaningful token records with a non-null mint, in pool order."""
        return tuple(t for t in self.tokens[: self.token_count] if t.is_active)

    def get_token(self, mint: Pubkey) -> TokenRecord | None:
        """Get the active record for a specific mint."""
        for token in self.active_tokens:
            if token.mint == mint:
                return token
        return None
