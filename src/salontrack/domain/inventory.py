"""Inventory domain service and stock derivation.

Stock is never stored. It is replayed from the stock log: the last
revaluation (by date) sets an absolute baseline, and every ``transaction``
entry dated on or after it adds its signed quantity.
"""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from salontrack.database.base import Database
from salontrack.domain.entities import (
    ProductStock,
    StockTransaction,
    StockTransactionType,
)
from salontrack.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_date,
    product_not_found,
)
from salontrack.utils.date_parser import is_iso_date

logger = logging.getLogger(__name__)

LOW_STOCK_THRESHOLD = 5

STATUS_OUT = "out"
STATUS_LOW = "low"
STATUS_OK = "ok"


def current_stock(transactions: Sequence[StockTransaction]) -> int:
    """Replay one product's stock log into its current quantity.

    Entries sharing a date keep the order they are given in (the store's
    insertion order), since the sort by date is stable.
    """
    if not transactions:
        return 0

    ordered = sorted(transactions, key=lambda t: t.date)
    revaluations = [t for t in ordered if t.type == StockTransactionType.REVALUATION]

    stock = 0
    if revaluations:
        baseline_date = revaluations[-1].date
        for entry in ordered:
            if entry.date < baseline_date:
                continue
            if entry.type == StockTransactionType.REVALUATION:
                stock = entry.quantity
            else:
                stock += entry.quantity
    else:
        for entry in ordered:
            if entry.type == StockTransactionType.TRANSACTION:
                stock += entry.quantity

    return stock


def stock_for_product(
    transactions: Sequence[StockTransaction], product_id: int
) -> int:
    """Current stock of one product from the full stock log."""
    return current_stock([t for t in transactions if t.product_id == product_id])


def stock_status(stock: int) -> str:
    """Classify a stock level for display."""
    if stock <= 0:
        return STATUS_OUT
    if stock <= LOW_STOCK_THRESHOLD:
        return STATUS_LOW
    return STATUS_OK


class InventoryService:
    """Service for managing products and the stock log."""

    def __init__(self, db: Database):
        """Initialize inventory service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_product(self, name: str, expiry_date: Optional[str] = None) -> int:
        """Create a product.

        Raises:
            ValidationError: If name is blank or expiry date is malformed
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if expiry_date is not None and not is_iso_date(expiry_date):
            raise ValidationError(invalid_date(expiry_date))
        return self.db.create_product(name=name.strip(), expiry_date=expiry_date)

    def update_product(
        self,
        product_id: int,
        name: Optional[str] = None,
        expiry_date: Optional[str] = None,
    ) -> None:
        """Update product name or expiry date."""
        if expiry_date is not None and not is_iso_date(expiry_date):
            raise ValidationError(invalid_date(expiry_date))
        self.db.update_product(product_id, name=name, expiry_date=expiry_date)

    def delete_product(self, product_id: int) -> int:
        """Delete a product and its stock log. Returns entries removed."""
        return self.db.delete_product(product_id)

    def record_transaction(
        self,
        product_id: int,
        date: str,
        type: StockTransactionType,
        quantity: int,
        price: Optional[Decimal] = None,
    ) -> int:
        """Record a revaluation or a stock movement.

        Args:
            product_id: Product ID
            date: Entry date (YYYY-MM-DD)
            type: Revaluation (absolute) or transaction (signed delta)
            quantity: New level for a revaluation, delta for a transaction
            price: Unit price, required and positive for transactions

        Returns:
            Stock transaction ID

        Raises:
            NotFoundError: If product doesn't exist
            ValidationError: If the entry is malformed
        """
        product = self.db.get_product(product_id)
        if product is None:
            raise NotFoundError(product_not_found(product_id))
        if not is_iso_date(date):
            raise ValidationError(invalid_date(date))

        try:
            kind = StockTransactionType(type)
        except ValueError:
            raise ValidationError(f"Unknown stock transaction type '{type}'")

        if kind == StockTransactionType.REVALUATION:
            if quantity < 0:
                raise ValidationError("Revaluation quantity cannot be negative")
            price = Decimal("0")
        elif price is None or price <= 0:
            raise ValidationError("Please enter a valid price for transaction")

        transaction_id = self.db.create_stock_transaction(
            product_id=product_id,
            date=date,
            type=kind,
            quantity=quantity,
            price=price,
        )
        logger.info("Recorded %s of %d for product %s", kind.value, quantity, product_id)
        return transaction_id

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a stock log entry."""
        self.db.delete_stock_transaction(transaction_id)

    def list_transactions(self, product_id: Optional[int] = None) -> list[StockTransaction]:
        """List stock log entries, newest date first."""
        transactions = self.db.list_stock_transactions(product_id=product_id)
        return sorted(transactions, key=lambda t: t.date, reverse=True)

    def get_current_stock(self, product_id: int) -> int:
        """Derive current stock for a product."""
        return current_stock(self.db.list_stock_transactions(product_id=product_id))

    def list_products_with_stock(self) -> list[ProductStock]:
        """Products with derived stock and status, ordered by name."""
        transactions = self.db.list_stock_transactions()
        results = []
        for product in self.db.list_products():
            stock = stock_for_product(transactions, product.id)
            results.append(
                ProductStock(product=product, stock=stock, status=stock_status(stock))
            )
        return results
