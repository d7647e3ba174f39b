"""Mathematical utilities for the 1DEX quoter.

This package provides the numeric primitives for weighted pool quotes:
- proportional: exact u64 scaling through a u128 intermediate
- float bridge: lossy int <-> float conversion with directional rounding
"""

from quoter.math.float_bridge import RoundDirection, f64_to_u64_rounded, u64_to_f64
from quoter.math.ratio import proportional, value_from_shares

__all__ = [
    "RoundDirection",
    "f64_to_u64_rounded",
    "u64_to_f64",
    "proportional",
    "value_from_shares",
]
