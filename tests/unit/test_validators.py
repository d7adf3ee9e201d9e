"""
Raw input coercion tests.

Run with: pytest tests/unit/test_validators.py -v
"""

from decimal import Decimal

import pytest

from booking_form.utils.validators import coerce_quantity, coerce_text


class TestCoerceQuantity:
    """Test quantity coercion from number inputs."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (3, 3),
            ("4", 4),
            (" 5 ", 5),
            ("2.0", 2),
            (7.0, 7),
        ],
    )
    def test_integral_values_become_int(self, raw, expected):
        """Integral input is stored as an int."""
        result = coerce_quantity(raw)
        assert result == expected
        assert isinstance(result, int)

    @pytest.mark.parametrize(
        "raw", [0, "0", "", None, "abc", "nan", "-3", -10, True, "inf", [1]]
    )
    def test_unusable_values_fall_back_to_one(self, raw):
        """Empty, unparsable, zero and negative input settles at 1."""
        assert coerce_quantity(raw) == 1

    def test_fractional_value_is_kept(self):
        """Fractions survive coercion so validation can reject them."""
        result = coerce_quantity("2.5")
        assert result == Decimal("2.5")
        assert isinstance(result, Decimal)

    def test_large_integer_kept_exactly(self):
        """Integers past float precision are stored as typed."""
        result = coerce_quantity(2**53 + 1)
        assert result == 9007199254740993
        assert isinstance(result, int)

    def test_thirty_digit_string_kept_exactly(self):
        """Long digit strings do not overflow or fall back to 1."""
        assert coerce_quantity("123456789012345678901234567890") == (
            123456789012345678901234567890
        )

    def test_exponent_notation_integral(self):
        assert coerce_quantity("1e3") == 1000

    def test_fraction_below_one_is_clamped(self):
        """Values under 1 are clamped up to 1."""
        assert coerce_quantity("0.5") == 1


class TestCoerceText:
    """Test text coercion."""

    def test_none_becomes_empty(self):
        assert coerce_text(None) == ""

    def test_text_is_not_trimmed(self):
        """Whitespace is kept as typed."""
        assert coerce_text("  Al ") == "  Al "

    def test_non_text_is_stringified(self):
        assert coerce_text(42) == "42"
