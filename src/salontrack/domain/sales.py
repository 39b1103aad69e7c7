"""Sale domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from salontrack.database.base import Database
from salontrack.domain.catalog import CatalogService
from salontrack.domain.date_range import DateLike, filter_by_date
from salontrack.domain.entities import MultiServiceSale, PaymentMethod, Sale, ServiceLine
from salontrack.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_date,
    sale_not_found,
)
from salontrack.domain.revenue import allows_discount, non_discountable_group_ids
from salontrack.utils.date_parser import is_iso_date

logger = logging.getLogger(__name__)

PAYMENT_METHODS = tuple(m.value for m in PaymentMethod)


def validate_sale_fields(
    name: Optional[str] = None,
    phone: Optional[str] = None,
    date: Optional[str] = None,
    amount: Optional[Decimal] = None,
    discount: Optional[Decimal] = None,
    payment_method: Optional[str] = None,
) -> None:
    """Check the fields that are given; None means not being set.

    Raises:
        ValidationError: On the first invalid field
    """
    if name is not None and not name.strip():
        raise ValidationError("Client name is required")
    if phone is not None and not phone.strip():
        raise ValidationError("Client phone is required")
    if date is not None and not is_iso_date(date):
        raise ValidationError(invalid_date(date))
    if amount is not None and amount < 0:
        raise ValidationError("Amount cannot be negative")
    if discount is not None and not (0 <= discount <= 100):
        raise ValidationError("Discount must be between 0 and 100")
    if payment_method is not None and payment_method not in PAYMENT_METHODS:
        raise ValidationError(
            f"Unknown payment method '{payment_method}'. "
            f"Supported: {', '.join(PAYMENT_METHODS)}"
        )


class SaleService:
    """Service for recording and listing sales."""

    def __init__(self, db: Database):
        """Initialize sale service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_lines(
        self, selections: Sequence[tuple[str, Optional[str]]]
    ) -> tuple[ServiceLine, ...]:
        """Turn (service name, stylist) picks into priced service lines.

        Raises:
            NotFoundError: If a service is not in the catalog
        """
        catalog = CatalogService(self.db)
        lines = []
        for service_name, stylist in selections:
            service = catalog.find_service(service_name)
            if service is None:
                raise NotFoundError(f"Service '{service_name}' not found")
            lines.append(
                ServiceLine(
                    name=service.name,
                    price=service.price,
                    stylist=stylist,
                    category=service.category,
                    group_id=service.group_id,
                )
            )
        return tuple(lines)

    def add_sale(
        self,
        name: str,
        phone: str,
        date: str,
        payment_method: str,
        services: Sequence[ServiceLine],
        discount: Decimal = Decimal("0"),
        amount: Optional[Decimal] = None,
        stylist: Optional[str] = None,
    ) -> int:
        """Record a multi-service sale.

        Args:
            name: Client name
            phone: Client phone, the client identity
            date: Sale date (YYYY-MM-DD)
            payment_method: One of PAYMENT_METHODS
            services: Ordered service lines
            discount: Percentage applied to discountable services
            amount: Pre-discount total, defaults to the sum of service prices
            stylist: Optional sale-level stylist used when a line has none

        Returns:
            Sale ID

        Raises:
            ValidationError: If any field is invalid
        """
        if not services:
            raise ValidationError("Please add at least one service")
        if amount is None:
            amount = sum((line.price for line in services), Decimal("0"))

        validate_sale_fields(name, phone, date, amount, discount, payment_method)

        draft = MultiServiceSale(
            id=0,
            name=name,
            phone=phone,
            services=tuple(services),
            date=date,
            amount=amount,
            discount=discount,
            payment_method=payment_method,
            timestamp="",
        )
        excluded = non_discountable_group_ids(self.db.list_service_groups())
        if discount and not allows_discount(draft, excluded):
            logger.info("Ignoring discount: no discountable services in sale")
            discount = Decimal("0")

        return self.db.create_sale(
            name=name.strip(),
            phone=phone.strip(),
            date=date,
            amount=amount,
            discount=discount,
            payment_method=payment_method,
            services=services,
            stylist=stylist,
        )

    def add_single_service_sale(
        self,
        name: str,
        phone: str,
        date: str,
        service: str,
        amount: Decimal,
        payment_method: str,
        discount: Decimal = Decimal("0"),
        stylist: Optional[str] = None,
    ) -> int:
        """Record a sale in the legacy single-service shape."""
        if not service or not service.strip():
            raise ValidationError("Please select a service")
        validate_sale_fields(name, phone, date, amount, discount, payment_method)
        return self.db.create_sale(
            name=name.strip(),
            phone=phone.strip(),
            date=date,
            amount=amount,
            discount=discount,
            payment_method=payment_method,
            service=service.strip(),
            stylist=stylist,
        )

    def get_sale(self, sale_id: int) -> Sale:
        """Get sale by ID.

        Raises:
            NotFoundError: If sale doesn't exist
        """
        sale = self.db.get_sale(sale_id)
        if sale is None:
            raise NotFoundError(sale_not_found(sale_id))
        return sale

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
        """Update the fields that are provided."""
        validate_sale_fields(name, phone, date, amount, discount, payment_method)
        if discount:
            sale = self.get_sale(sale_id)
            excluded = non_discountable_group_ids(self.db.list_service_groups())
            if isinstance(sale, MultiServiceSale) and not allows_discount(sale, excluded):
                logger.info("Ignoring discount: no discountable services in sale %s", sale_id)
                discount = Decimal("0")
        self.db.update_sale(
            sale_id,
            name=name,
            phone=phone,
            date=date,
            amount=amount,
            discount=discount,
            payment_method=payment_method,
        )

    def delete_sale(self, sale_id: int) -> None:
        """Delete a sale."""
        self.db.delete_sale(sale_id)

    def list_sales(
        self,
        preset: str = "all",
        date_from: Optional[DateLike] = None,
        date_to: Optional[DateLike] = None,
        today: Optional[date] = None,
    ) -> list[Sale]:
        """List sales in a preset or custom range, newest first."""
        return filter_by_date(self.db.list_sales(), preset, date_from, date_to, today=today)
