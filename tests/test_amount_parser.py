"""Tests for amount parsing and rupee formatting."""

import pytest
from decimal import Decimal

from salontrack.utils.amount_parser import parse_amount
from salontrack.utils.currency import format_inr, format_percent


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1234.50", Decimal("1234.50")),
            ("₹1234.50", Decimal("1234.50")),
            ("Rs. 1,234.50", Decimal("1234.50")),
            ("INR 500", Decimal("500")),
            ("1,23,456.78", Decimal("123456.78")),
            ("(123.45)", Decimal("-123.45")),
            ("-3", Decimal("-3")),
        ],
    )
    def test_parses_formats(self, text, expected):
        """Test the supported amount formats."""
        assert parse_amount(text) == expected

    def test_empty_amount(self):
        """Test that an empty string is rejected."""
        with pytest.raises(ValueError, match="Empty amount"):
            parse_amount("   ")

    def test_garbage_amount(self):
        """Test that non-numeric input is rejected."""
        with pytest.raises(ValueError, match="Could not parse amount"):
            parse_amount("twelve")

    def test_non_finite_amount(self):
        """Test that NaN and infinity are rejected."""
        with pytest.raises(ValueError):
            parse_amount("NaN")
        with pytest.raises(ValueError):
            parse_amount("Infinity")


class TestFormatInr:
    """Tests for Indian rupee display."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "₹0.00"),
            (999, "₹999.00"),
            (1000, "₹1,000.00"),
            (Decimal("123456.78"), "₹1,23,456.78"),
            (12345678.9, "₹1,23,45,678.90"),
            (Decimal("-1500.5"), "-₹1,500.50"),
            (Decimal("0.005"), "₹0.01"),
        ],
    )
    def test_format_inr(self, value, expected):
        """Test lakh/crore digit grouping with two decimals."""
        assert format_inr(value) == expected

    def test_format_percent(self):
        """Test one-decimal percentages."""
        assert format_percent(12.345) == "12.3%"
        assert format_percent(0) == "0.0%"
