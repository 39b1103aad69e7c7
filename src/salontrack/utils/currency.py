"""Indian Rupee display formatting."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

RUPEE = "₹"


def _group_indian(digits: str) -> str:
    """Group an integer string the Indian way: 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(value: Union[Decimal, float, int]) -> str:
    """Format a money value as ``₹1,23,456.78`` with two decimals."""
    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, fraction = f"{abs(amount):.2f}".split(".")
    return f"{sign}{RUPEE}{_group_indian(whole)}.{fraction}"


def format_percent(value: float) -> str:
    """Format a percentage with one decimal, e.g. ``12.5%``."""
    return f"{value:.1f}%"
