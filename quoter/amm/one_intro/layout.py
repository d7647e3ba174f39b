"""1DEX pool account layout.

Borsh-packed little-endian encoding of the PoolState account, preceded by
the 8-byte Anchor discriminator.
"""

from __future__ import annotations

import hashlib

from construct import Array, Bytes, ConstructError, Int8ul, Int64ul, Struct
from solders.pubkey import Pubkey

from quoter.constants import DISCRIMINATOR_LENGTH, MAX_TOKEN_COUNT
from quoter.errors import PoolDecodeError

from .state import PoolState, TokenRecord

PUBKEY_LAYOUT = Bytes(32)

TokenRecordLayout = Struct(
    "mint" / PUBKEY_LAYOUT,
    "account" / PUBKEY_LAYOUT,
    "balance" / Int64ul,
    "weight" / Int64ul,
)

PoolStateLayout = Struct(
    "authority" / PUBKEY_LAYOUT,
    "authority_bump" / Int8ul,
    "lp_mint" / PUBKEY_LAYOUT,
    "lp_virtual_supply" / Int64ul,
    "token_count" / Int64ul,
    "tokens" / Array(MAX_TOKEN_COUNT, TokenRecordLayout),
    "total_weight" / Int64ul,
    "swap_fee_ratio" / Int64ul,
)

# sha256("account:<Name>")[:8], Anchor's account discriminator
POOL_STATE_DISCRIMINATOR = hashlib.sha256(b"account:PoolState").digest()[:DISCRIMINATOR_LENGTH]


def decode_pool_state(data: bytes) -> PoolState:
    """Decode a PoolState from account bytes with the discriminator already stripped.

    Raises:
        PoolDecodeError: If the buffer is too short for the layout
    """
    try:
        parsed = PoolStateLayout.parse(data)
    except ConstructError as e:
        raise PoolDecodeError(f"Invalid pool state ({len(data)} bytes): {e}") from e

    return PoolState(
        authority=Pubkey.from_bytes(parsed.authority),
        authority_bump=parsed.authority_bump,
        lp_mint=Pubkey.from_bytes(parsed.lp_mint),
        lp_virtual_supply=parsed.lp_virtual_supply,
        token_count=parsed.token_count,
        tokens=tuple(
            TokenRecord(
                mint=Pubkey.from_bytes(token.mint),
                account=Pubkey.from_bytes(token.account),
                balance=token.balance,
                weight=token.weight,
            )
            for token in parsed.tokens
        ),
        total_weight=parsed.total_weight,
        swap_fee_ratio=parsed.swap_fee_ratio,
    )


def decode_pool_account(data: bytes) -> PoolState:
    """Decode raw account data, skipping the Anchor discriminator."""
    if len(data) < DISCRIMINATOR_LENGTH:
        raise PoolDecodeError(f"Account data too short for discriminator: {len(data)} bytes")
    return decode_pool_state(data[DISCRIMINATOR_LENGTH:])


def encode_pool_state(state: PoolState) -> bytes:
    """Encode a PoolState without the discriminator."""
    return PoolStateLayout.build(
        {
            "authority": bytes(state.authority),
            "authority_bump": state.authority_bump,
            "lp_mint": bytes(state.lp_mint),
            "lp_virtual_supply": state.lp_virtual_supply,
            "token_count": state.token_count,
            "tokens": [
                {
                    "mint": bytes(token.mint),
                    "account": bytes(token.account),
                    "balance": token.balance,
                    "weight": token.weight,
                }
                for token in state.tokens
            ],
            "total_weight": state.total_weight,
            "swap_fee_ratio": state.swap_fee_ratio,
        }
    )


def encode_pool_account(state: PoolState) -> bytes:
    """Encode a PoolState as full account data, discriminator included."""
    return POOL_STATE_DISCRIMINATOR + encode_pool_state(state)
