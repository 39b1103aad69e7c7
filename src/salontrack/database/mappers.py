"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, including the choice between the
legacy single-service and the multi-service sale shapes.
"""

from decimal import Decimal

from salontrack.domain import entities as domain
from salontrack.database.models import (
    Sale as ORMSale,
    SaleServiceLine as ORMSaleServiceLine,
    Expense as ORMExpense,
    Product as ORMProduct,
    StockTransaction as ORMStockTransaction,
    Service as ORMService,
    ServiceGroup as ORMServiceGroup,
    Stylist as ORMStylist,
)


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def service_line_to_domain(orm_line: ORMSaleServiceLine) -> domain.ServiceLine:
    """Convert SQLAlchemy SaleServiceLine model to domain ServiceLine entity."""
    return domain.ServiceLine(
        name=orm_line.name,
        price=_decimal(orm_line.price),
        stylist=orm_line.stylist,
        category=orm_line.category,
        group_id=orm_line.group_id,
    )


def sale_to_domain(orm_sale: ORMSale) -> domain.Sale:
    """Convert SQLAlchemy Sale model to LegacySale or MultiServiceSale."""
    if not orm_sale.lines and orm_sale.service:
        return domain.LegacySale(
            id=orm_sale.id,
            name=orm_sale.name,
            phone=orm_sale.phone,
            service=orm_sale.service,
            stylist=orm_sale.stylist,
            date=orm_sale.date,
            amount=_decimal(orm_sale.amount),
            discount=_decimal(orm_sale.discount),
            payment_method=orm_sale.payment_method,
            timestamp=orm_sale.timestamp,
        )

    return domain.MultiServiceSale(
        id=orm_sale.id,
        name=orm_sale.name,
        phone=orm_sale.phone,
        services=tuple(service_line_to_domain(line) for line in orm_sale.lines),
        date=orm_sale.date,
        amount=_decimal(orm_sale.amount),
        discount=_decimal(orm_sale.discount),
        payment_method=orm_sale.payment_method,
        timestamp=orm_sale.timestamp,
        stylist=orm_sale.stylist,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        item=orm_expense.item,
        amount=_decimal(orm_expense.amount),
        date=orm_expense.date,
        timestamp=orm_expense.timestamp,
    )


def product_to_domain(orm_product: ORMProduct) -> domain.Product:
    """Convert SQLAlchemy Product model to domain Product entity."""
    return domain.Product(
        id=orm_product.id,
        name=orm_product.name,
        expiry_date=orm_product.expiry_date,
        timestamp=orm_product.timestamp,
    )


def stock_transaction_to_domain(
    orm_transaction: ORMStockTransaction,
) -> domain.StockTransaction:
    """Convert SQLAlchemy StockTransaction model to domain entity."""
    return domain.StockTransaction(
        id=orm_transaction.id,
        product_id=orm_transaction.product_id,
        product_name=orm_transaction.product.name if orm_transaction.product else "",
        date=orm_transaction.date,
        type=domain.StockTransactionType(orm_transaction.type),
        quantity=orm_transaction.quantity,
        price=_decimal(orm_transaction.price),
        timestamp=orm_transaction.timestamp,
    )


def service_group_to_domain(orm_group: ORMServiceGroup) -> domain.ServiceGroup:
    """Convert SQLAlchemy ServiceGroup model to domain ServiceGroup entity."""
    return domain.ServiceGroup(
        id=orm_group.id,
        name=orm_group.name,
        category=orm_group.category,
        order=orm_group.order,
    )


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(
        id=orm_service.id,
        name=orm_service.name,
        category=orm_service.category,
        price=_decimal(orm_service.price),
        group_id=orm_service.group_id,
    )


def stylist_to_domain(orm_stylist: ORMStylist) -> domain.Stylist:
    """Convert SQLAlchemy Stylist model to domain Stylist entity."""
    return domain.Stylist(
        id=orm_stylist.id,
        name=orm_stylist.name,
        gender=orm_stylist.gender,
    )
