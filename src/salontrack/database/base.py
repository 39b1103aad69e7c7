"""Abstract database interface."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable, Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from salontrack.domain.entities import (
    Expense,
    Product,
    Sale,
    Service,
    ServiceGroup,
    ServiceLine,
    StockTransaction,
    StockTransactionType,
    Stylist,
)

SALES = "sales"
EXPENSES = "expenses"
PRODUCTS = "products"
STOCK_TRANSACTIONS = "stock_transactions"
SERVICES = "services"
SERVICE_GROUPS = "service_groups"
STYLISTS = "stylists"

COLLECTIONS = (
    SALES,
    EXPENSES,
    PRODUCTS,
    STOCK_TRANSACTIONS,
    SERVICES,
    SERVICE_GROUPS,
    STYLISTS,
)


class Database(ABC):
    """Abstract record store interface for salontrack.

    Every mutation pushes a full snapshot of the affected collection to
    subscribers registered through ``subscribe``.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def subscribe(
        self, collection: str, callback: Callable[[list], None]
    ) -> Callable[[], None]:
        """Register for full-collection snapshots. Returns an unsubscribe callable."""
        pass

    # Sale operations
    @abstractmethod
    def create_sale(
        self,
        name: str,
        phone: str,
        date: str,
        amount: Decimal,
        discount: Decimal,
        payment_method: str,
        services: Sequence[ServiceLine] = (),
        service: Optional[str] = None,
        stylist: Optional[str] = None,
    ) -> int:
        """Create a sale. Returns sale ID."""
        pass

    @abstractmethod
    def get_sale(self, sale_id: int) -> Optional[Sale]:
        """Get sale by ID."""
        pass

    @abstractmethod
    def list_sales(self) -> list[Sale]:
        """List all sales, newest first."""
        pass

    @abstractmethod
    def update_sale(
        self,
        sale_id: int,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        date: Optional[str] = None,
        amount: Optional[Decimal] = None,
        discount: Optional[Decimal] = None,
        payment_method: Optional[str] = None,
    ) -> None:
        """Update sale fields."""
        pass

    @abstractmethod
    def delete_sale(self, sale_id: int) -> None:
        """Delete a sale."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(self, item: str, amount: Decimal, date: str) -> int:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(self) -> list[Expense]:
        """List all expenses, newest first."""
        pass

    @abstractmethod
    def update_expense(
        self,
        expense_id: int,
        item: Optional[str] = None,
        amount: Optional[Decimal] = None,
        date: Optional[str] = None,
    ) -> None:
        """Update expense fields."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense."""
        pass

    # Product and stock operations
    @abstractmethod
    def create_product(self, name: str, expiry_date: Optional[str] = None) -> int:
        """Create a product. Returns product ID."""
        pass

    @abstractmethod
    def get_product(self, product_id: int) -> Optional[Product]:
        """Get product by ID."""
        pass

    @abstractmethod
    def list_products(self) -> list[Product]:
        """List products ordered by name."""
        pass

    @abstractmethod
    def update_product(
        self,
        product_id: int,
        name: Optional[str] = None,
        expiry_date: Optional[str] = None,
    ) -> None:
        """Update product fields."""
        pass

    @abstractmethod
    def delete_product(self, product_id: int) -> int:
        """Delete a product and its stock transactions. Returns transactions removed."""
        pass

    @abstractmethod
    def create_stock_transaction(
        self,
        product_id: int,
        date: str,
        type: StockTransactionType,
        quantity: int,
        price: Decimal,
    ) -> int:
        """Record a stock transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def list_stock_transactions(
        self, product_id: Optional[int] = None
    ) -> list[StockTransaction]:
        """List stock transactions in insertion order."""
        pass

    @abstractmethod
    def delete_stock_transaction(self, transaction_id: int) -> None:
        """Delete a stock transaction."""
        pass

    # Catalog operations
    @abstractmethod
    def create_service_group(self, name: str, category: str, order: int) -> int:
        """Create a service group. Returns group ID."""
        pass

    @abstractmethod
    def get_service_group(self, group_id: int) -> Optional[ServiceGroup]:
        """Get service group by ID."""
        pass

    @abstractmethod
    def list_service_groups(self) -> list[ServiceGroup]:
        """List service groups by display order."""
        pass

    @abstractmethod
    def count_services_in_group(self, group_id: int) -> int:
        """Count catalog services assigned to a group."""
        pass

    @abstractmethod
    def delete_service_group(self, group_id: int) -> None:
        """Delete a service group."""
        pass

    @abstractmethod
    def create_service(
        self, name: str, category: str, price: Decimal, group_id: Optional[int] = None
    ) -> int:
        """Create a catalog service. Returns service ID."""
        pass

    @abstractmethod
    def get_service(self, service_id: int) -> Optional[Service]:
        """Get catalog service by ID."""
        pass

    @abstractmethod
    def list_services(self) -> list[Service]:
        """List catalog services ordered by name."""
        pass

    @abstractmethod
    def update_service_price(self, service_id: int, price: Decimal) -> None:
        """Change a catalog service's list price."""
        pass

    @abstractmethod
    def delete_service(self, service_id: int) -> None:
        """Delete a catalog service."""
        pass

    @abstractmethod
    def create_stylist(self, name: str, gender: str) -> int:
        """Create a stylist. Returns stylist ID."""
        pass

    @abstractmethod
    def get_stylist(self, stylist_id: int) -> Optional[Stylist]:
        """Get stylist by ID."""
        pass

    @abstractmethod
    def list_stylists(self) -> list[Stylist]:
        """List stylists ordered by name."""
        pass

    @abstractmethod
    def delete_stylist(self, stylist_id: int) -> None:
        """Delete a stylist."""
        pass
