"""Tests for the integer/float bridge and directional rounding."""

import math

import pytest

from quoter.errors import CalculationFailure
from quoter.math.float_bridge import (
    RoundDirection,
    div,
    f64_to_u64_rounded,
    pow,
    u64_to_f64,
)


class TestConversion:
    """Tests for u64 <-> f64 conversion."""

    def test_small_values_exact(self):
        """Values below 2^53 convert exactly."""
        assert u64_to_f64(123_456_789) == 123_456_789.0

    def test_large_values_lossy(self):
        """Values above 2^53 lose precision."""
        assert u64_to_f64(2**53 + 1) == float(2**53)

    def test_floor(self):
        """FLOOR rounds toward zero for positive values."""
        assert f64_to_u64_rounded(2.9, RoundDirection.FLOOR) == 2

    def test_ceiling(self):
        """CEILING rounds up any fractional part."""
        assert f64_to_u64_rounded(2.1, RoundDirection.CEILING) == 3

    def test_integral_value_unchanged(self):
        """Integral floats round to themselves in both directions."""
        assert f64_to_u64_rounded(2.0, RoundDirection.FLOOR) == 2
        assert f64_to_u64_rounded(2.0, RoundDirection.CEILING) == 2

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_raises(self, value):
        """NaN and infinities are not amounts."""
        with pytest.raises(CalculationFailure):
            f64_to_u64_rounded(value, RoundDirection.CEILING)

    @pytest.mark.parametrize("rounding", [RoundDirection.FLOOR, RoundDirection.CEILING])
    def test_negative_raises(self, rounding):
        """Negative results are not clamped to zero."""
        with pytest.raises(CalculationFailure):
            f64_to_u64_rounded(-1.5, rounding)

    def test_above_u64_raises(self):
        """2^64 does not fit in u64."""
        with pytest.raises(CalculationFailure):
            f64_to_u64_rounded(float(2**64), RoundDirection.FLOOR)


class TestFloatOps:
    """Tests for guarded float operations."""

    def test_div(self):
        """Plain division."""
        assert div(1.0, 4.0) == 0.25

    def test_div_by_zero_raises(self):
        """Division by zero is a calculation failure, not ZeroDivisionError."""
        with pytest.raises(CalculationFailure):
            div(1.0, 0.0)

    def test_pow(self):
        """Plain power."""
        assert pow(4.0, 0.5) == 2.0

    def test_pow_overflow_raises(self):
        """Overflow is a calculation failure."""
        with pytest.raises(CalculationFailure):
            pow(10.0, 400.0)

    def test_pow_negative_base_raises(self):
        """Fractional power of a negative base is undefined."""
        with pytest.raises(CalculationFailure):
            pow(-1.0, 0.5)
