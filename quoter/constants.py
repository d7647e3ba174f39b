"""Protocol constants for the 1DEX weighted pool program.

Centralizes well-known program ids, account addresses and fixed-point
parameters.
"""

from solders.pubkey import Pubkey

# Fixed-point scale for fee and guard ratios (9 fractional digits)
PONE = 1_000_000_000

# Liquidity guard: a single trade may not move more than 50% of one side
MAX_IN_RATIO = PONE // 2
MAX_OUT_RATIO = PONE // 2

# Fixed capacity of the pool token array
MAX_TOKEN_COUNT = 4

# Anchor account discriminator prefix
DISCRIMINATOR_LENGTH = 8

ONE_INTRO_LABEL = "1DEX"

# 1DEX program and its singleton accounts (mainnet)
ONE_INTRO_PROGRAM_ID = Pubkey.from_string("DEXYosS6oEGvk8uCDayvwEZz4qEyDJRf9nFgYCaqPMTm")
ONE_INTRO_METADATA_STATE = Pubkey.from_string("5nmAbnjJfW1skrPvYjLTBNdhoKzJfznnbvDcM8G2U7Ki")
ONE_INTRO_TOKEN_AUTH_PDA = Pubkey.from_string("ATowQwFzdJBJ9VFSfoNKmuB8GiSeo8foM5vRriwmKmFB")

# SPL programs
TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")

# All-zero key (base58 "1111...1"), marks an unused token slot
NULL_MINT = Pubkey.default()
