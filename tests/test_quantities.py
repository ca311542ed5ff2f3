"""Unit tests for quantity parsing and scaling."""

import pytest

from recipebasket.normalize.quantities import (
    format_number,
    parse_quantity_string,
    scale_quantity,
)


class TestParseQuantityString:
    """Tests for parse_quantity_string function."""

    def test_parse_integer(self):
        """Test parsing simple integers."""
        assert parse_quantity_string("2") == 2.0
        assert parse_quantity_string(" 250 ") == 250.0

    def test_parse_decimal(self):
        """Test parsing decimal numbers."""
        assert parse_quantity_string("1.5") == 1.5

    def test_parse_fraction(self):
        """Test parsing simple and mixed fractions."""
        assert parse_quantity_string("1/2") == 0.5
        assert parse_quantity_string("1 1/2") == 1.5

    def test_unparseable(self):
        """Test that empty and free-text quantities give None."""
        assert parse_quantity_string("") is None
        assert parse_quantity_string(None) is None
        assert parse_quantity_string("a handful") is None
        assert parse_quantity_string("1/0") is None


class TestFormatNumber:
    """Tests for format_number function."""

    def test_whole(self):
        """Test whole numbers print without decimals."""
        assert format_number(4.0) == "4"

    def test_common_fractions(self):
        """Test that common fractional parts become vulgar fractions."""
        assert format_number(0.5) == "½"
        assert format_number(1.25) == "1 ¼"
        assert format_number(2.75) == "2 ¾"
        assert format_number(1 / 3) == "⅓"
        assert format_number(2 / 3) == "⅔"

    def test_small_remainder_dropped(self):
        """Test that remainders under a tenth are dropped."""
        assert format_number(3.05) == "3"

    def test_remainder_rounding_up(self):
        """Test that remainders rounding to one carry to the next whole number."""
        assert format_number(0.999) == "1"
        assert format_number(2.97) == "3"

    def test_other_decimals(self):
        """Test that other decimals keep one place."""
        assert format_number(1.4) == "1.4"


class TestScaleQuantity:
    """Tests for scale_quantity function."""

    @pytest.mark.parametrize(
        "quantity,multiplier,expected",
        [
            ("2", 2, "4"),
            ("250", 0.5, "125"),
            ("1/2", 3, "1 ½"),
            ("1 1/2", 2, "3"),
            ("1.5", 2, "3"),
            ("1-2", 2, "2-4"),
            ("2 to 3", 0.5, "1-1 ½"),
        ],
    )
    def test_scales(self, quantity, multiplier, expected):
        """Test scaling supported formats."""
        assert scale_quantity(quantity, multiplier) == expected

    def test_unparseable_unchanged(self):
        """Test that free text is returned as authored."""
        assert scale_quantity("a pinch", 2) == "a pinch"

    def test_empty(self):
        """Test that empty quantities stay empty."""
        assert scale_quantity("", 2) == ""
        assert scale_quantity(None, 2) == ""
