"""Domain model entities for salontrack.

These are pure data classes representing salon business concepts,
independent of database schema. Dates are kept as fixed-width
``yyyy-MM-dd`` strings so range filtering can compare them directly.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class PaymentMethod(str, Enum):
    """Payment methods accepted at the counter."""

    CASH = "Cash"
    UPI = "UPI"
    CARD = "Card"
    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    OTHER = "Other"


class StockTransactionType(str, Enum):
    """Kinds of entries in the stock log."""

    REVALUATION = "revaluation"
    TRANSACTION = "transaction"


@dataclass(frozen=True)
class ServiceLine:
    """One service performed as part of a sale."""

    name: str
    price: Decimal
    stylist: Optional[str] = None
    category: Optional[str] = None
    group_id: Optional[int] = None


@dataclass(frozen=True)
class LegacySale:
    """Single-service sale recorded before multi-service entry existed."""

    id: int
    name: str
    phone: str
    service: str
    stylist: Optional[str]
    date: str
    amount: Decimal
    discount: Decimal
    payment_method: str
    timestamp: str


@dataclass(frozen=True)
class MultiServiceSale:
    """Sale made up of an ordered list of service lines."""

    id: int
    name: str
    phone: str
    services: tuple[ServiceLine, ...]
    date: str
    amount: Decimal
    discount: Decimal
    payment_method: str
    timestamp: str
    stylist: Optional[str] = None


Sale = Union[LegacySale, MultiServiceSale]


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: int
    item: str
    amount: Decimal
    date: str
    timestamp: str


@dataclass(frozen=True)
class Product:
    """Inventory product. Stock is derived, never stored."""

    id: int
    name: str
    expiry_date: Optional[str]
    timestamp: str


@dataclass(frozen=True)
class StockTransaction:
    """Stock log entry for a product."""

    id: int
    product_id: int
    product_name: str
    date: str
    type: StockTransactionType
    quantity: int
    price: Decimal
    timestamp: str


@dataclass(frozen=True)
class ServiceGroup:
    """Named grouping of services; also gates discount eligibility."""

    id: int
    name: str
    category: str
    order: int


@dataclass(frozen=True)
class Service:
    """Catalog service with its list price."""

    id: int
    name: str
    category: str
    price: Decimal
    group_id: Optional[int] = None


@dataclass(frozen=True)
class Stylist:
    """Stylist domain entity."""

    id: int
    name: str
    gender: str


@dataclass(frozen=True)
class PaymentBucket:
    """Revenue and sale count for one payment-method family."""

    name: str
    revenue: float
    count: int


@dataclass(frozen=True)
class ServiceCount:
    """Booking count for one service name (or the ``Others`` bucket)."""

    name: str
    count: int


@dataclass(frozen=True)
class StylistStats:
    """Revenue and workload attributed to one stylist."""

    name: str
    revenue: float
    appointments: int
    services: int


@dataclass(frozen=True)
class SalesTotals:
    """Headline totals for a set of sales."""

    count: int
    revenue: float
    clients: int
    average: float


@dataclass(frozen=True)
class AnalyticsReport:
    """Everything the analytics view renders for one date range."""

    totals: SalesTotals
    payment_buckets: tuple[PaymentBucket, ...]
    service_distribution: tuple[ServiceCount, ...]
    stylists: tuple[StylistStats, ...]
    monthly_collection: float
    monthly_label: str
    growth: float


@dataclass
class ClientSummary:
    """Per-client ledger folded from the appointment history."""

    name: str
    phone: str
    visits: int = 0
    total_spent: float = 0.0
    last_visit: str = ""


@dataclass(frozen=True)
class ProductStock:
    """Product paired with its derived stock level."""

    product: Product
    stock: int
    status: str


@dataclass(frozen=True)
class ExpenseSummary:
    """Totals over a set of expenses."""

    count: int
    total: float
    average: float
    expenses: tuple[Expense, ...] = field(default_factory=tuple)
