"""Tests for SafeInt checked arithmetic."""

import pytest

from quoter.safe_int import (
    U64_MAX,
    U128_MAX,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    U64Overflow,
    U128Overflow,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_invalid_type_raises(self):
        """SafeInt rejects floats, strings and bools."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_sub_underflow_raises(self):
        """Subtraction below zero raises Underflow."""
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "5 - 10" in str(exc_info.value)

    def test_truthiness(self):
        """Zero is falsy, anything else truthy."""
        assert not S(0)
        assert S(1)

    def test_sub_to_zero(self):
        """Subtracting equal values gives zero."""
        assert (S(5) - 5).value == 0

    def test_mul_widens(self):
        """u64 * u64 products are exact."""
        assert (S(U64_MAX) * S(U64_MAX)).value == U64_MAX * U64_MAX

    def test_floordiv(self):
        """Floor division truncates."""
        assert (S(7) // S(2)).value == 3

    def test_floordiv_by_zero_raises(self):
        """Division by zero raises DivisionByZero."""
        with pytest.raises(DivisionByZero):
            S(7) // 0

    def test_errors_are_arithmetic_errors(self):
        """All SafeInt errors derive from ArithmeticError."""
        assert issubclass(SafeIntError, ArithmeticError)
        assert issubclass(Underflow, SafeIntError)
        assert issubclass(U64Overflow, SafeIntError)


class TestSafeIntNarrowing:
    """Tests for u64/u128 narrowing."""

    def test_to_u64_bounds(self):
        """to_u64 accepts [0, 2^64-1]."""
        assert S(0).to_u64() == 0
        assert S(U64_MAX).to_u64() == U64_MAX

    def test_to_u64_overflow(self):
        """to_u64 rejects values above u64."""
        with pytest.raises(U64Overflow):
            S(U64_MAX + 1).to_u64()

    def test_to_u64_negative(self):
        """to_u64 rejects negative values."""
        with pytest.raises(U64Overflow):
            S(-1).to_u64()

    def test_to_u128_bounds(self):
        """to_u128 accepts the largest u64 product."""
        assert S(U64_MAX * U64_MAX).to_u128() == U64_MAX * U64_MAX

    def test_to_u128_overflow(self):
        """to_u128 rejects values above u128."""
        with pytest.raises(U128Overflow):
            S(U128_MAX + 1).to_u128()

    def test_checked_sub(self):
        """checked_sub returns None instead of raising."""
        assert S(3).checked_sub(5) is None
        assert S(5).checked_sub(3) == 2
