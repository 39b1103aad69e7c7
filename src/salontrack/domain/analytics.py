"""Sales aggregation engine and analytics domain service.

The module-level functions are pure: they take a list of sales (already
narrowed by the date-range filter) and return report entities. They never
touch the database, so repeated calls on the same input give identical
output. AnalyticsService wires them to the record store.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Any, Optional, Sequence

from salontrack.database.base import Database
from salontrack.domain.date_range import DateLike, filter_by_date, preset_range
from salontrack.domain.entities import (
    AnalyticsReport,
    LegacySale,
    PaymentBucket,
    Sale,
    SalesTotals,
    ServiceCount,
    ServiceLine,
    StylistStats,
)
from salontrack.domain.revenue import final_amount, non_discountable_group_ids
from salontrack.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

NO_STYLIST = "No stylist"
OTHERS = "Others"
TOP_SERVICES = 10

CASH = "Cash"
UPI = "UPI"
CARD = "Card"
OTHER = "Other"
PAYMENT_FAMILIES = (CASH, UPI, CARD, OTHER)
CARD_METHODS = frozenset({"Card", "Credit Card", "Debit Card"})


def percentage(part: float, total: float) -> float:
    """Share of total as a percentage, 0 when total is 0."""
    if not total:
        return 0.0
    return part / total * 100


def average(total: float, count: int) -> float:
    """Mean value, 0 when count is 0."""
    if not count:
        return 0.0
    return total / count


def payment_family(method: str) -> str:
    """Map a stored payment method to its reporting bucket."""
    if method == CASH:
        return CASH
    if method == UPI:
        return UPI
    if method in CARD_METHODS:
        return CARD
    return OTHER


def service_lines(sale: Sale) -> tuple[ServiceLine, ...]:
    """Lines for stylist attribution; a legacy sale counts as one line."""
    if isinstance(sale, LegacySale):
        return (
            ServiceLine(name=sale.service, price=sale.amount, stylist=sale.stylist),
        )
    return sale.services


def sales_totals(
    sales: Sequence[Sale], excluded_group_ids: frozenset[int] = frozenset()
) -> SalesTotals:
    """Count, revenue, distinct clients and average sale value."""
    revenue = sum(float(final_amount(s, excluded_group_ids)) for s in sales)
    count = len(sales)
    return SalesTotals(
        count=count,
        revenue=revenue,
        clients=len({s.phone for s in sales}),
        average=average(revenue, count),
    )


def payment_split(
    sales: Sequence[Sale], excluded_group_ids: frozenset[int] = frozenset()
) -> tuple[PaymentBucket, ...]:
    """Revenue and count per payment family, always all four buckets."""
    revenue: dict[str, float] = {name: 0.0 for name in PAYMENT_FAMILIES}
    counts: dict[str, int] = {name: 0 for name in PAYMENT_FAMILIES}

    for sale in sales:
        family = payment_family(sale.payment_method)
        revenue[family] += float(final_amount(sale, excluded_group_ids))
        counts[family] += 1

    return tuple(
        PaymentBucket(name=name, revenue=revenue[name], count=counts[name])
        for name in PAYMENT_FAMILIES
    )


def payment_distribution(
    buckets: Sequence[PaymentBucket],
) -> tuple[PaymentBucket, ...]:
    """Buckets worth charting: those with positive revenue."""
    return tuple(b for b in buckets if b.revenue > 0)


def service_counts(sales: Sequence[Sale]) -> dict[str, int]:
    """Bookings per service name, in first-seen order.

    Only recorded service lines count; legacy sales carry none.
    """
    counts: dict[str, int] = {}
    for sale in sales:
        if isinstance(sale, LegacySale):
            continue
        for line in sale.services:
            counts[line.name] = counts.get(line.name, 0) + 1
    return counts


def service_distribution(
    sales: Sequence[Sale], limit: int = TOP_SERVICES
) -> tuple[ServiceCount, ...]:
    """Top services by booking count, with the long tail folded into Others.

    Sorting is stable, so equal counts keep first-seen order.
    """
    ranked = sorted(service_counts(sales).items(), key=lambda item: -item[1])
    if len(ranked) <= limit:
        return tuple(ServiceCount(name=name, count=count) for name, count in ranked)

    top = [ServiceCount(name=name, count=count) for name, count in ranked[:limit]]
    rest = sum(count for _, count in ranked[limit:])
    top.append(ServiceCount(name=OTHERS, count=rest))
    return tuple(top)


def stylist_revenue_map(
    sales: Sequence[Sale], excluded_group_ids: frozenset[int] = frozenset()
) -> dict[str, dict[str, Any]]:
    """Raw per-stylist accumulation, including the NO_STYLIST bucket.

    Each sale's final amount is split across its stylists in proportion to
    the number of services each performed, not the service prices.
    """
    stats: dict[str, dict[str, Any]] = defaultdict(
        lambda: {"revenue": 0.0, "appointments": set(), "services": 0}
    )

    for sale in sales:
        lines = service_lines(sale)
        if not lines:
            continue

        per_stylist: dict[str, int] = {}
        for line in lines:
            name = line.stylist or sale.stylist or NO_STYLIST
            per_stylist[name] = per_stylist.get(name, 0) + 1

        amount = float(final_amount(sale, excluded_group_ids))
        for name, performed in per_stylist.items():
            entry = stats[name]
            entry["revenue"] += amount * performed / len(lines)
            entry["appointments"].add(sale.id)
            entry["services"] += performed

    return dict(stats)


def stylist_attribution(
    sales: Sequence[Sale],
    excluded_group_ids: frozenset[int] = frozenset(),
    include_unassigned: bool = False,
) -> tuple[StylistStats, ...]:
    """Per-stylist revenue, appointment and service counts, highest first."""
    results = [
        StylistStats(
            name=name,
            revenue=data["revenue"],
            appointments=len(data["appointments"]),
            services=data["services"],
        )
        for name, data in stylist_revenue_map(sales, excluded_group_ids).items()
        if include_unassigned or name != NO_STYLIST
    ]
    results.sort(key=lambda s: -s.revenue)
    return tuple(results)


def month_over_month_growth(sales: Sequence[Sale], today: date) -> float:
    """Percent change in sale count from last calendar month to this one."""
    this_start, this_end = preset_range("thisMonth", today=today)
    last_start, last_end = preset_range("lastMonth", today=today)
    this_month = sum(1 for s in sales if this_start <= s.date <= this_end)
    last_month = sum(1 for s in sales if last_start <= s.date <= last_end)
    if last_month == 0:
        return 0.0
    return (this_month - last_month) / last_month * 100


def custom_range_label(date_from: DateLike, date_to: Optional[DateLike]) -> str:
    """Human label for a custom range, e.g. ``Mar 01, 2025 - Mar 31, 2025``."""

    def fmt(value: DateLike) -> str:
        day = parse_date(value) if isinstance(value, str) else value
        return day.strftime("%b %d, %Y")

    if date_to is None:
        return fmt(date_from)
    return f"{fmt(date_from)} - {fmt(date_to)}"


class AnalyticsService:
    """Service for building analytics reports from stored sales."""

    def __init__(self, db: Database):
        """Initialize analytics service.

        Args:
            db: Database instance
        """
        self.db = db

    def excluded_group_ids(self) -> frozenset[int]:
        """IDs of service groups whose services never take a discount."""
        return non_discountable_group_ids(self.db.list_service_groups())

    def get_filtered_sales(
        self,
        preset: str = "all",
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> list[Sale]:
        """Get sales inside the preset or custom range."""
        sales = filter_by_date(
            self.db.list_sales(), preset, date_from, date_to, today=today
        )
        logger.debug("Filtered %d sales for period %s", len(sales), preset)
        return sales

    def build_report(
        self,
        preset: str = "today",
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> AnalyticsReport:
        """Build the analytics report for a preset or custom range.

        Args:
            preset: Named period, ignored when date_from is given
            date_from: Optional custom range start
            date_to: Optional custom range end (defaults to date_from)
            today: Reference day for presets, defaults to the current date

        Returns:
            AnalyticsReport for the selected sales
        """
        today = today or date.today()
        excluded = self.excluded_group_ids()
        all_sales = self.db.list_sales()
        sales = filter_by_date(all_sales, preset, date_from, date_to, today=today)

        totals = sales_totals(sales, excluded)

        if date_from is not None:
            monthly_collection = totals.revenue
            monthly_label = custom_range_label(date_from, date_to)
        else:
            month_sales = filter_by_date(all_sales, "thisMonth", today=today)
            monthly_collection = sales_totals(month_sales, excluded).revenue
            monthly_label = today.strftime("%B %Y")

        return AnalyticsReport(
            totals=totals,
            payment_buckets=payment_split(sales, excluded),
            service_distribution=service_distribution(sales),
            stylists=stylist_attribution(sales, excluded),
            monthly_collection=monthly_collection,
            monthly_label=monthly_label,
            growth=month_over_month_growth(all_sales, today),
        )
