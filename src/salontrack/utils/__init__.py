"""Utility functions for salontrack."""

from salontrack.utils.date_parser import parse_date, to_iso, is_iso_date
from salontrack.utils.amount_parser import parse_amount
from salontrack.utils.currency import format_inr

__all__ = ["parse_date", "to_iso", "is_iso_date", "parse_amount", "format_inr"]
