"""Pydantic models for the quote API.

Pubkeys travel as base58 strings, account data as base64 and token amounts
as decimal strings (u64 does not fit in a JSON double).
"""

from __future__ import annotations

import base64
import binascii
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field
from solders.pubkey import Pubkey

from quoter.amm.base import SwapMode
from quoter.safe_int import U64_MAX


def validate_pubkey(value: Any) -> str:
    """Validate that a value is a base58-encoded 32-byte public key.

    Raises:
        ValueError: If value is not a string or not a valid public key
    """
    if not isinstance(value, str):
        raise ValueError(f"Pubkey must be a base58 string, got {type(value).__name__}")
    try:
        Pubkey.from_string(value)
    except ValueError as err:
        raise ValueError(f"Invalid pubkey: '{value}'") from err
    return value


def validate_u64(value: Any) -> int:
    """Validate that a value is a u64 given as int or decimal string.

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("U64 must be an integer, got bool")
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err
    if not isinstance(value, int):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")
    return value


def validate_base64(value: Any) -> bytes:
    """Decode standard base64 account data.

    Raises:
        ValueError: If value is not a valid base64 string
    """
    if not isinstance(value, str):
        raise ValueError(f"Account data must be a base64 string, got {type(value).__name__}")
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as err:
        raise ValueError(f"Account data is not valid base64: {err}") from err


# Base58 Solana public key
PubkeyStr = Annotated[str, BeforeValidator(validate_pubkey)]

# 64-bit unsigned integer (int or decimal string)
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer as int or decimal string"),
]

# Base64-encoded bytes
Base64Bytes = Annotated[bytes, BeforeValidator(validate_base64)]


class PoolAccount(BaseModel):
    """A pool account snapshot as fetched from RPC."""

    key: PubkeyStr
    owner: PubkeyStr
    data: Base64Bytes


class QuoteRequest(BaseModel):
    """A quote request against one pool account."""

    pool: PoolAccount
    input_mint: PubkeyStr = Field(alias="inputMint")
    output_mint: PubkeyStr = Field(alias="outputMint")
    amount: U64
    swap_mode: SwapMode = Field(default=SwapMode.EXACT_IN, alias="swapMode")

    model_config = {"populate_by_name": True}


class QuoteResponse(BaseModel):
    """Quote result. Amounts are decimal strings, feePct an exact decimal string."""

    pool: str
    label: str
    in_amount: str = Field(alias="inAmount")
    out_amount: str = Field(alias="outAmount")
    fee_amount: str = Field(alias="feeAmount")
    fee_mint: str = Field(alias="feeMint")
    fee_pct: str = Field(alias="feePct")
    not_enough_liquidity: bool = Field(alias="notEnoughLiquidity")

    model_config = {"populate_by_name": True}
