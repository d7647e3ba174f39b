"""Safe integer wrapper for on-chain integer widths.

Token amounts, weights and fee ratios are u64 on chain, and intermediate
products are computed in u128. SafeInt adds width-checked arithmetic on
top of Python's unbounded ints:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- Narrowing to u64/u128 raises U64Overflow/U128Overflow

Usage pattern:
    from quoter.safe_int import S

    def scale(amount: int, numerator: int, denominator: int) -> int:
        # Wrap at entry, widen to u128 for the product
        product = (S(amount) * S(numerator)).to_u128()

        # Natural arithmetic - automatically safe
        result = S(product) // S(denominator)  # Raises if denominator == 0

        # Narrow at exit
        return result.to_u64()
"""

from __future__ import annotations

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class U64Overflow(SafeIntError):
    """Value does not fit in u64."""

    pass


class U128Overflow(SafeIntError):
    """Value does not fit in u128."""

    pass


class SafeInt:
    """Integer with checked arithmetic operations.

    Negative intermediate values are allowed (Python ints), but subtraction
    that goes below zero and narrowing outside the target width raise.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt (bool included)
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    # --- Arithmetic operations ---

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    # --- Conversion ---

    def __bool__(self) -> bool:
        return self._value != 0

    # --- Named operations ---

    def checked_sub(self, other: SafeInt | int) -> SafeInt | None:
        """Subtract, returning None on underflow instead of raising."""
        result = self._value - _extract_value(other)
        if result < 0:
            return None
        return SafeInt(result)

    def to_u64(self) -> int:
        """Convert to int, validating u64 bounds.

        Raises:
            U64Overflow: If value is negative or exceeds 2^64-1
        """
        if not self.is_u64():
            raise U64Overflow(f"Value does not fit in u64: {self._value}")
        return self._value

    def to_u128(self) -> int:
        """Convert to int, validating u128 bounds.

        Raises:
            U128Overflow: If value is negative or exceeds 2^128-1
        """
        if not 0 <= self._value <= U128_MAX:
            raise U128Overflow(f"Value does not fit in u128: {self._value}")
        return self._value

    def is_u64(self) -> bool:
        """Check if value fits in u64 without raising."""
        return 0 <= self._value <= U64_MAX


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
