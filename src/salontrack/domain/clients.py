"""Client rollup and promotions domain service."""

import logging
from datetime import date
from typing import Optional, Sequence

from salontrack.database.base import Database
from salontrack.domain.analytics import average
from salontrack.domain.date_range import DateLike, filter_by_date
from salontrack.domain.entities import ClientSummary, Sale
from salontrack.domain.errors import ValidationError
from salontrack.domain.revenue import final_amount, non_discountable_group_ids

logger = logging.getLogger(__name__)

SORT_RECENT = "recent"
SORT_VISITS = "visits"
SORT_SPEND = "spend"
SORT_OPTIONS = (SORT_RECENT, SORT_VISITS, SORT_SPEND)

MESSAGE_TEMPLATES = {
    "welcome": "Welcome to our salon! Enjoy 20% off on your next visit. Book now!",
    "birthday": "Happy Birthday! 🎉 Get 30% off on all services today. Treat yourself!",
    "reminder": "It's been a while! Come visit us and get 15% off on your next service.",
}


def rollup_clients(
    sales: Sequence[Sale], excluded_group_ids: frozenset[int] = frozenset()
) -> list[ClientSummary]:
    """Fold sales into one ledger entry per phone number.

    The client's name comes from the first sale seen for that phone.
    Results are ordered by last visit, most recent first.
    """
    clients: dict[str, ClientSummary] = {}

    for sale in sales:
        client = clients.get(sale.phone)
        if client is None:
            client = ClientSummary(name=sale.name, phone=sale.phone, last_visit=sale.date)
            clients[sale.phone] = client

        client.visits += 1
        client.total_spent += float(final_amount(sale, excluded_group_ids))
        if sale.date > client.last_visit:
            client.last_visit = sale.date

    return sorted(clients.values(), key=lambda c: c.last_visit, reverse=True)


def sort_clients(clients: Sequence[ClientSummary], sort: str) -> list[ClientSummary]:
    """Re-sort a rollup by visits or spend; ``recent`` keeps the given order."""
    if sort == SORT_VISITS:
        return sorted(clients, key=lambda c: c.visits, reverse=True)
    if sort == SORT_SPEND:
        return sorted(clients, key=lambda c: c.total_spent, reverse=True)
    if sort == SORT_RECENT:
        return list(clients)
    raise ValidationError(
        f"Unknown sort '{sort}'. Supported: {', '.join(SORT_OPTIONS)}"
    )


def search_clients(
    clients: Sequence[ClientSummary], query: Optional[str]
) -> list[ClientSummary]:
    """Keep clients whose name (case-insensitive) or phone contains query."""
    if not query:
        return list(clients)
    needle = query.lower()
    return [c for c in clients if needle in c.name.lower() or query in c.phone]


def resolve_message(template: Optional[str], custom_message: Optional[str]) -> str:
    """Pick the promotion text from a template id or a custom message."""
    if custom_message:
        return custom_message
    if template is None:
        raise ValidationError("Please enter a message")
    try:
        return MESSAGE_TEMPLATES[template]
    except KeyError:
        raise ValidationError(
            f"Unknown template '{template}'. Supported: {', '.join(MESSAGE_TEMPLATES)}"
        )


class ClientService:
    """Service for client ledgers and promotion recipients."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_clients(
        self,
        sort: str = SORT_RECENT,
        search: Optional[str] = None,
        preset: str = "all",
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> list[ClientSummary]:
        """Build the client ledger, optionally limited to a date range.

        Args:
            sort: recent, visits or spend
            search: Optional name or phone substring
            preset: Named period, ignored when date_from is given
            date_from: Optional custom range start
            date_to: Optional custom range end
            today: Reference day for presets

        Returns:
            List of ClientSummary
        """
        sales = filter_by_date(self.db.list_sales(), preset, date_from, date_to, today=today)
        excluded = non_discountable_group_ids(self.db.list_service_groups())
        clients = rollup_clients(sales, excluded)
        logger.debug("Rolled up %d sales into %d clients", len(sales), len(clients))
        return search_clients(sort_clients(clients, sort), search)

    def revenue_overview(self, clients: Sequence[ClientSummary]) -> tuple[float, float]:
        """Total lifetime revenue and average spend per client."""
        total = sum(c.total_spent for c in clients)
        return total, average(total, len(clients))

    def build_recipients(
        self, clients: Sequence[ClientSummary], message: str
    ) -> list[tuple[str, str]]:
        """Pair each client's phone with the promotion message."""
        if not message or not message.strip():
            raise ValidationError("Please enter a message")
        return [(c.phone, message) for c in clients]
