"""Base classes and types for pool adapters.

A pool adapter wraps one on-chain pool account and answers the questions a
router asks of it: which mints it trades, which accounts to refresh, what a
trade would cost, and which accounts an execution needs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, TypeAlias

from solders.instruction import AccountMeta
from solders.pubkey import Pubkey


class SwapMode(str, Enum):
    """Which side of the trade the caller fixes."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class Swap(str, Enum):
    """Swap instruction family used to execute a route leg."""

    TOKEN_SWAP = "TokenSwap"


@dataclass(frozen=True)
class Account:
    """Raw on-chain account contents."""

    owner: Pubkey
    data: bytes
    lamports: int = 0


@dataclass(frozen=True)
class KeyedAccount:
    """An account together with its address."""

    key: Pubkey
    account: Account
    params: dict[str, Any] | None = None


# Refreshed accounts keyed by address
AccountMap: TypeAlias = dict[Pubkey, Account]


@dataclass(frozen=True)
class QuoteParams:
    """A quote request.

    Attributes:
        amount: Input amount for ExactIn, output amount for ExactOut
        input_mint: Mint the trader pays with
        output_mint: Mint the trader receives
        swap_mode: Which side ``amount`` fixes
    """

    amount: int
    input_mint: Pubkey
    output_mint: Pubkey
    swap_mode: SwapMode = SwapMode.EXACT_IN


@dataclass(frozen=True)
class Quote:
    """Result of quoting a trade against a pool.

    Attributes:
        in_amount: Amount paid by the trader, fee included
        out_amount: Amount received by the trader
        fee_amount: Fee charged, denominated in fee_mint
        fee_mint: Mint the fee is charged in
        fee_pct: Fee rate as an exact decimal fraction
        not_enough_liquidity: Trade exceeds the pool's liquidity guard
    """

    in_amount: int
    out_amount: int
    fee_amount: int
    fee_mint: Pubkey
    fee_pct: Decimal
    not_enough_liquidity: bool = False


@dataclass(frozen=True)
class SwapParams:
    """Parameters for building the execution account list."""

    source_mint: Pubkey
    destination_mint: Pubkey
    source_token_account: Pubkey
    destination_token_account: Pubkey
    token_transfer_authority: Pubkey
    in_amount: int = 0
    out_amount: int = 0


@dataclass(frozen=True)
class SwapAndAccountMetas:
    """Instruction family plus ordered accounts for executing a swap."""

    swap: Swap
    account_metas: list[AccountMeta] = field(default_factory=list)


class Amm(ABC):
    """Abstract base class for pool adapters."""

    @classmethod
    @abstractmethod
    def from_keyed_account(cls, keyed_account: KeyedAccount) -> Amm:
        """Build an adapter from a pool account snapshot."""
        ...

    @property
    @abstractmethod
    def key(self) -> Pubkey:
        """Pool account address."""
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable venue name."""
        ...

    @property
    @abstractmethod
    def program_id(self) -> Pubkey:
        """Program owning the pool account."""
        ...

    @abstractmethod
    def get_reserve_mints(self) -> list[Pubkey]:
        """Mints this pool can trade, in pool order."""
        ...

    @abstractmethod
    def get_accounts_to_update(self) -> list[Pubkey]:
        """Accounts whose fresh contents are needed by update()."""
        ...

    @abstractmethod
    def update(self, account_map: AccountMap) -> None:
        """Refresh the pool snapshot from fetched accounts."""
        ...

    @abstractmethod
    def quote(self, quote_params: QuoteParams) -> Quote:
        """Quote a trade against the current snapshot."""
        ...

    @abstractmethod
    def get_swap_and_account_metas(self, swap_params: SwapParams) -> SwapAndAccountMetas:
        """Ordered accounts for executing a swap through this pool."""
        ...

    @abstractmethod
    def clone_amm(self) -> Amm:
        """Independent copy of this adapter."""
        ...
