"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

ISO_DATE_FORMAT = "%Y-%m-%d"
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str == "last month":
        return (today - relativedelta(months=1)).replace(day=1)
    if date_str == "this month":
        return today.replace(day=1)
    if date_str == "last year":
        return today.replace(month=1, day=1) - relativedelta(years=1)
    if date_str == "this year":
        return today.replace(month=1, day=1)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def to_iso(value: Union[date, str]) -> str:
    """Render a date as the fixed-width ``yyyy-MM-dd`` string used in records."""
    if isinstance(value, str):
        return parse_date(value).strftime(ISO_DATE_FORMAT)
    return value.strftime(ISO_DATE_FORMAT)


def is_iso_date(value: str) -> bool:
    """Return True if value is a real calendar date in ``yyyy-MM-dd`` form."""
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True
