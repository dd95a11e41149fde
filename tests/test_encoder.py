"""
Tests for the CSD encoders.

These tests verify:
    - Known conversions for floats and integers
    - Zero and sub-unit values
    - Non-zero digit budgets (to_csdnnz, to_csdnnz_i)
    - Canonical form for integers and for |x| >= 1
    - Round-trip through the decoder
"""

import random

import pytest

from csd.analyzer import count_nonzeros, is_canonical
from csd.decoder import to_decimal, to_decimal_i
from csd.encoder import to_csd, to_csd_i, to_csdfixed, to_csdnnz, to_csdnnz_i
from csd.errors import InvalidArgument


class TestToCsd:
    """Test float -> CSD with a places budget."""

    def test_positive_value(self):
        """28.5 with two places."""
        assert to_csd(28.5, 2) == "+00-00.+0"

    def test_negative_fraction(self):
        """Values below one start with a '0' integral digit."""
        assert to_csd(-0.5, 2) == "0.-0"

    def test_zero_with_places(self):
        """Zero pads the fractional part."""
        assert to_csd(0.0, 2) == "0.00"

    def test_zero_without_places(self):
        """Zero with no places keeps the point."""
        assert to_csd(0.0, 0) == "0."

    def test_integral_value_no_places(self):
        assert to_csd(28.0, 0) == "+00-00."

    def test_negative_value(self):
        """Negative values flip every digit."""
        assert to_csd(-28.5, 2) == "-00+00.-0"

    def test_negative_places_rejected(self):
        with pytest.raises(InvalidArgument):
            to_csd(1.0, -1)

    def test_is_canonical_from_one(self):
        """No two adjacent non-zero digits once |x| >= 1."""
        rng = random.Random(1234)
        for _ in range(200):
            value = rng.choice((-1.0, 1.0)) * rng.uniform(1.0, 1000.0)
            assert is_canonical(to_csd(value, 12))

    def test_below_one_may_repeat_digits(self):
        """Values below one start at 2**0, so adjacent non-zeros can occur."""
        assert to_csd(0.75, 4) == "0.++00"
        assert to_decimal("0.++00") == 0.75

    def test_round_trip_precision(self):
        """Decoding recovers the value to within 2**-places."""
        rng = random.Random(42)
        for _ in range(100):
            value = rng.uniform(-1000000.0, 1000000.0)
            assert abs(to_decimal(to_csd(value, 15)) - value) <= 2 ** -15

    def test_large_values(self):
        for value in (123456789.123456789, -987654321.987654321):
            assert to_decimal(to_csd(value, 10)) == pytest.approx(value, abs=2 ** -10)

    def test_tiny_values(self):
        for value in (0.00000000012345, -0.00000000098765):
            assert to_decimal(to_csd(value, 20)) == pytest.approx(value, abs=2 ** -20)


class TestToCsdI:
    """Test int -> CSD."""

    def test_positive(self):
        assert to_csd_i(28) == "+00-00"

    def test_negative(self):
        assert to_csd_i(-28) == "-00+00"

    def test_zero(self):
        """Zero (and negative zero) encode as a single '0'."""
        assert to_csd_i(0) == "0"
        assert to_csd_i(-0) == "0"

    @pytest.mark.parametrize("value, expected", [
        (1, "+"),
        (-1, "-"),
        (2, "+0"),
        (3, "+0-"),
        (7, "+00-"),
    ])
    def test_small_values(self, value, expected):
        assert to_csd_i(value) == expected

    def test_leading_digit_is_nonzero(self):
        for value in range(1, 300):
            assert to_csd_i(value)[0] == "+"
            assert to_csd_i(-value)[0] == "-"

    def test_round_trip_range(self):
        for value in range(-2000, 2001):
            csd = to_csd_i(value)
            assert to_decimal_i(csd) == value
            assert is_canonical(csd)

    def test_round_trip_32_bit_bounds(self):
        rng = random.Random(7)
        values = [2 ** 30, -(2 ** 30), 2 ** 30 - 1, -(2 ** 30) + 1]
        values += [rng.randint(-(2 ** 30), 2 ** 30) for _ in range(200)]
        for value in values:
            assert to_decimal_i(to_csd_i(value)) == value


class TestToCsdnnz:
    """Test float -> CSD with a non-zero digit budget."""

    @pytest.mark.parametrize("value, nnz, expected", [
        (28.5, 4, "+00-00.+"),
        (28.5, 2, "+00-00"),
        (28.5, 1, "+00000"),
        (-0.5, 4, "0.-"),
        (0.5, 4, "0.+"),
        (0.0, 4, "0"),
    ])
    def test_known_values(self, value, nnz, expected):
        assert to_csdnnz(value, nnz) == expected

    def test_alias(self):
        """to_csdfixed is the same function."""
        assert to_csdfixed(28.5, 2) == "+00-00"

    def test_zero_budget_rejected(self):
        with pytest.raises(InvalidArgument):
            to_csdnnz(28.5, 0)

    def test_budget_respected(self):
        rng = random.Random(99)
        for _ in range(200):
            value = rng.uniform(-10000.0, 10000.0)
            for nnz in (1, 2, 3, 5, 8):
                assert count_nonzeros(to_csdnnz(value, nnz)) <= nnz

    def test_exact_value_stops_early(self):
        """A value representable within the budget decodes exactly."""
        assert to_decimal(to_csdnnz(28.5, 10)) == 28.5


class TestToCsdnnzI:
    """Test int -> CSD with a non-zero digit budget."""

    @pytest.mark.parametrize("value, nnz, expected", [
        (28, 4, "+00-00"),
        (28, 2, "+00-00"),
        (28, 1, "+00000"),
        (158, 2, "+0+00000"),
        (0, 4, "0"),
        (-0, 4, "0"),
    ])
    def test_known_values(self, value, nnz, expected):
        assert to_csdnnz_i(value, nnz) == expected

    def test_zero_budget_rejected(self):
        with pytest.raises(InvalidArgument):
            to_csdnnz_i(28, 0)

    def test_width_matches_unbounded(self):
        """Padding keeps the width of the unbounded encoding."""
        for value in range(1, 500):
            assert len(to_csdnnz_i(value, 1)) == len(to_csd_i(value))

    def test_budget_respected(self):
        for value in range(-1000, 1001):
            for nnz in (1, 2, 3):
                assert count_nonzeros(to_csdnnz_i(value, nnz)) <= nnz

    def test_large_budget_matches_unbounded(self):
        for value in range(-300, 301):
            assert to_csdnnz_i(value, 32) == to_csd_i(value)
