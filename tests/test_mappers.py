"""Tests for database mappers."""

import pytest
from decimal import Decimal

from salontrack.database.models import (
    Sale as ORMSale,
    SaleServiceLine as ORMSaleServiceLine,
    Product as ORMProduct,
    StockTransaction as ORMStockTransaction,
    Service as ORMService,
)
from salontrack.database.mappers import (
    sale_to_domain,
    service_to_domain,
    stock_transaction_to_domain,
)
from salontrack.domain.entities import (
    LegacySale,
    MultiServiceSale,
    Service,
    StockTransactionType,
)


def _orm_sale(**overrides):
    fields = dict(
        id=1,
        name="Priya",
        phone="111",
        date="2025-03-15",
        amount=Decimal("500"),
        discount=Decimal("0"),
        payment_method="Cash",
        timestamp="2025-03-15T10:00:00+00:00",
    )
    fields.update(overrides)
    return ORMSale(**fields)


class TestSaleMapper:
    """Tests for choosing the sale shape."""

    def test_service_string_maps_to_legacy(self):
        """Test a sale with only a service string is a LegacySale."""
        sale = sale_to_domain(_orm_sale(service="Haircut", stylist="Asha"))
        assert isinstance(sale, LegacySale)
        assert sale.service == "Haircut"
        assert sale.stylist == "Asha"

    def test_lines_map_to_multi_service(self):
        """Test a sale with lines is a MultiServiceSale with ordered lines."""
        orm_sale = _orm_sale(
            lines=[
                ORMSaleServiceLine(position=0, name="Haircut", price=Decimal("300"), stylist="Asha"),
                ORMSaleServiceLine(position=1, name="Spa", price=Decimal("200"), group_id=3),
            ]
        )
        sale = sale_to_domain(orm_sale)
        assert isinstance(sale, MultiServiceSale)
        assert [line.name for line in sale.services] == ["Haircut", "Spa"]
        assert sale.services[1].group_id == 3

    def test_no_lines_no_service_is_empty_multi_service(self):
        sale = sale_to_domain(_orm_sale())
        assert isinstance(sale, MultiServiceSale)
        assert sale.services == ()

    def test_float_amount_becomes_decimal(self):
        sale = sale_to_domain(_orm_sale(service="Haircut", amount=499.5))
        assert sale.amount == Decimal("499.5")


class TestStockTransactionMapper:
    """Tests for stock entry mapping."""

    def test_type_and_product_name(self):
        orm_entry = ORMStockTransaction(
            id=4,
            product_id=2,
            product=ORMProduct(id=2, name="Shampoo"),
            date="2025-03-01",
            type="revaluation",
            quantity=10,
            price=Decimal("0"),
            timestamp="",
        )
        entry = stock_transaction_to_domain(orm_entry)
        assert entry.type is StockTransactionType.REVALUATION
        assert entry.product_name == "Shampoo"
        assert entry.quantity == 10

    def test_unknown_type_rejected(self):
        orm_entry = ORMStockTransaction(
            id=4, product_id=2, date="2025-03-01", type="gift", quantity=1, price=Decimal("0")
        )
        with pytest.raises(ValueError):
            stock_transaction_to_domain(orm_entry)


def test_service_to_domain():
    service = service_to_domain(
        ORMService(id=1, name="Haircut", category="women", price=Decimal("500"), group_id=None)
    )
    assert service == Service(id=1, name="Haircut", category="women", price=Decimal("500"))
