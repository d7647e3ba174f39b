"""Tests for exact proportional scaling."""

import pytest

from quoter.constants import MAX_IN_RATIO, PONE
from quoter.errors import CalculationFailure
from quoter.math import proportional, value_from_shares
from quoter.safe_int import U64_MAX


class TestProportional:
    """Tests for proportional()."""

    def test_exact_division(self):
        """100 * 3 / 4 = 75."""
        assert proportional(100, 3, 4) == 75

    def test_rounds_down(self):
        """10 * 1 / 3 floors to 3."""
        assert proportional(10, 1, 3) == 3

    def test_zero_denominator_is_identity(self):
        """A zero denominator returns the amount unchanged."""
        assert proportional(12_345, 7, 0) == 12_345

    def test_zero_numerator(self):
        """A zero numerator gives zero."""
        assert proportional(12_345, 0, 7) == 0

    def test_wide_intermediate(self):
        """u64 * u64 fits the u128 intermediate."""
        assert proportional(U64_MAX, U64_MAX, U64_MAX) == U64_MAX

    def test_result_overflow_raises(self):
        """A result above u64 cannot be narrowed back."""
        with pytest.raises(CalculationFailure):
            proportional(U64_MAX, U64_MAX, 1)

    def test_input_above_u64_raises(self):
        """Inputs must be u64."""
        with pytest.raises(CalculationFailure):
            proportional(U64_MAX + 1, 1, 1)

    def test_negative_input_raises(self):
        """Negative inputs are not u64."""
        with pytest.raises(CalculationFailure):
            proportional(-5, 1, 1)

    def test_fee_extraction(self):
        """0.3% of 1_000_000 is 3_000."""
        assert proportional(1_000_000, 3_000_000, PONE) == 3_000

    def test_fee_extraction_rounds_down(self):
        """0.3% of 999 is 2.997, floored to 2."""
        assert proportional(999, 3_000_000, PONE) == 2


class TestValueFromShares:
    """Tests for value_from_shares()."""

    def test_guard_threshold(self):
        """Half of a 1_000_000 reserve."""
        assert value_from_shares(MAX_IN_RATIO, 1_000_000, PONE) == 500_000

    def test_guard_threshold_odd_reserve(self):
        """Half of an odd reserve floors."""
        assert value_from_shares(MAX_IN_RATIO, 1_000_001, PONE) == 500_000

    def test_gross_up(self):
        """Grossing 997 up by a 0.3% fee gives 1000."""
        assert value_from_shares(PONE, 997, PONE - 3_000_000) == 1000
