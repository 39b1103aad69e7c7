"""Date-range filtering for dated salon records.

Records carry their date as a fixed-width ``yyyy-MM-dd`` string, so range
membership is a plain string comparison: lexicographic order on that
format is chronological order.
"""

from datetime import date, timedelta
from typing import Iterable, Optional, Protocol, TypeVar, Union

from dateutil.relativedelta import relativedelta

from salontrack.utils.date_parser import to_iso

PRESETS = (
    "today",
    "7days",
    "30days",
    "3months",
    "thisMonth",
    "lastMonth",
    "year",
    "all",
)

DateLike = Union[date, str]


class Dated(Protocol):
    date: str


R = TypeVar("R", bound=Dated)


def preset_range(
    preset: str, today: Optional[date] = None
) -> tuple[Optional[str], Optional[str]]:
    """Get inclusive (start, end) bounds for a named preset.

    Args:
        preset: One of PRESETS
        today: Reference day, defaults to the current date

    Returns:
        Tuple of ``yyyy-MM-dd`` strings; both None for ``all``

    Raises:
        ValueError: If preset is not recognized
    """
    today = today or date.today()
    end = to_iso(today)

    if preset == "today":
        return end, end
    if preset == "7days":
        return to_iso(today - timedelta(days=7)), end
    if preset == "30days":
        return to_iso(today - timedelta(days=30)), end
    if preset == "3months":
        return to_iso(today - relativedelta(months=3)), end
    if preset == "thisMonth":
        first = today.replace(day=1)
        last = first + relativedelta(months=1) - timedelta(days=1)
        return to_iso(first), to_iso(last)
    if preset == "lastMonth":
        first = (today - relativedelta(months=1)).replace(day=1)
        last = today.replace(day=1) - timedelta(days=1)
        return to_iso(first), to_iso(last)
    if preset == "year":
        return to_iso(today - timedelta(days=365)), end
    if preset == "all":
        return None, None

    raise ValueError(
        f"Unknown period: '{preset}'. Supported periods: {', '.join(PRESETS)}"
    )


def resolve_range(
    preset: str = "all",
    date_from: Optional[DateLike] = None,
    date_to: Optional[DateLike] = None,
    today: Optional[date] = None,
) -> tuple[Optional[str], Optional[str]]:
    """Resolve the effective bounds from a preset or a custom range.

    A custom range wins whenever ``date_from`` is set. A ``date_from``
    without ``date_to`` selects that single day.
    """
    if date_from is not None:
        start = to_iso(date_from)
        end = to_iso(date_to) if date_to is not None else start
        return start, end
    return preset_range(preset, today=today)


def in_range(value: str, start: Optional[str], end: Optional[str]) -> bool:
    """Inclusive string comparison of a record date against bounds."""
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True


def filter_by_date(
    records: Iterable[R],
    preset: str = "all",
    date_from: Optional[DateLike] = None,
    date_to: Optional[DateLike] = None,
    today: Optional[date] = None,
) -> list[R]:
    """Narrow records to those dated inside the preset or custom range."""
    start, end = resolve_range(preset, date_from, date_to, today=today)
    if start is None and end is None:
        return list(records)
    return [record for record in records if in_range(record.date, start, end)]

