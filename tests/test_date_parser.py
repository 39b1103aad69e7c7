"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from salontrack.utils.date_parser import is_iso_date, parse_date, to_iso


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2025-01-15")
    assert result == date(2025, 1, 15)


def test_parse_written_date():
    """Test parsing a written-out date."""
    assert parse_date("January 15, 2025") == date(2025, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    assert parse_date("today") == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    assert parse_date("Yesterday ") == date.today() - timedelta(days=1)


def test_parse_this_month():
    """Test parsing 'this month'."""
    assert parse_date("this month") == date.today().replace(day=1)


def test_parse_this_year():
    """Test parsing 'this year'."""
    assert parse_date("this year") == date(date.today().year, 1, 1)


def test_parse_invalid_date():
    """Test that unparseable input raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_to_iso_from_date_and_string():
    """Test rendering dates as fixed-width strings."""
    assert to_iso(date(2025, 3, 5)) == "2025-03-05"
    assert to_iso("March 5, 2025") == "2025-03-05"


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2025-03-05", True),
        ("2024-02-29", True),
        ("2025-02-29", False),
        ("2025-3-5", False),
        ("05-03-2025", False),
        ("", False),
    ],
)
def test_is_iso_date(value, expected):
    """Test strict yyyy-MM-dd validation."""
    assert is_iso_date(value) is expected
