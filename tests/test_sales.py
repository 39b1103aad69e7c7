"""Tests for recording sales."""

import pytest
from decimal import Decimal

from salontrack.domain.entities import LegacySale, MultiServiceSale
from salontrack.domain.errors import NotFoundError, ValidationError
from salontrack.domain.sales import validate_sale_fields


class TestValidation:
    """Tests for sale field validation."""

    def test_valid_fields(self):
        validate_sale_fields("Priya", "9876543210", "2025-03-15", Decimal("500"), Decimal("10"), "UPI")

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"name": " "}, "name is required"),
            ({"phone": ""}, "phone is required"),
            ({"date": "15-03-2025"}, "Invalid date"),
            ({"amount": Decimal("-1")}, "negative"),
            ({"discount": Decimal("101")}, "between 0 and 100"),
            ({"payment_method": "Cheque"}, "Unknown payment method"),
        ],
    )
    def test_invalid_fields(self, kwargs, message):
        with pytest.raises(ValidationError, match=message):
            validate_sale_fields(**kwargs)


class TestSaleService:
    """Tests for SaleService against the database."""

    def test_add_multi_service_sale(self, sale_service, sample_catalog):
        """Test a sale stores its lines in order with catalog prices."""
        lines = sale_service.build_lines([("Haircut", "Asha"), ("Manicure", "Ravi")])
        sale_id = sale_service.add_sale(
            name=" Priya ",
            phone="9876543210",
            date="2025-03-15",
            payment_method="UPI",
            services=lines,
            discount=Decimal("10"),
        )

        sale = sale_service.get_sale(sale_id)
        assert isinstance(sale, MultiServiceSale)
        assert sale.name == "Priya"
        assert sale.amount == Decimal("900")
        assert sale.discount == Decimal("10")
        assert [(line.name, line.stylist) for line in sale.services] == [
            ("Haircut", "Asha"),
            ("Manicure", "Ravi"),
        ]
        assert sale.services[1].group_id == sample_catalog["nails"]

    def test_explicit_amount(self, sale_service, sample_catalog):
        lines = sale_service.build_lines([("Haircut", None)])
        sale_id = sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", lines, amount=Decimal("450"))
        assert sale_service.get_sale(sale_id).amount == Decimal("450")

    def test_discount_dropped_when_nothing_discountable(self, sale_service, sample_catalog):
        """Test a discount on nails-only services is stored as zero."""
        lines = sale_service.build_lines([("Manicure", None)])
        sale_id = sale_service.add_sale(
            "Priya", "111", "2025-03-15", "Cash", lines, discount=Decimal("20")
        )
        assert sale_service.get_sale(sale_id).discount == Decimal("0")

    def test_requires_a_service(self, sale_service):
        with pytest.raises(ValidationError, match="at least one service"):
            sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", [])

    def test_unknown_service(self, sale_service, sample_catalog):
        with pytest.raises(NotFoundError):
            sale_service.build_lines([("Bridal", None)])

    def test_legacy_sale(self, sale_service):
        """Test the single-service shape round-trips as a legacy sale."""
        sale_id = sale_service.add_single_service_sale(
            name="Meena",
            phone="222",
            date="2025-03-01",
            service="Threading",
            amount=Decimal("80"),
            payment_method="Cash",
            stylist="Asha",
        )
        sale = sale_service.get_sale(sale_id)
        assert isinstance(sale, LegacySale)
        assert sale.service == "Threading"
        assert sale.stylist == "Asha"

    def test_update_sale(self, sale_service, sample_catalog):
        lines = sale_service.build_lines([("Haircut", None)])
        sale_id = sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", lines)
        sale_service.update_sale(sale_id, payment_method="Card", discount=Decimal("5"))
        sale = sale_service.get_sale(sale_id)
        assert sale.payment_method == "Card"
        assert sale.discount == Decimal("5")

    def test_update_discount_dropped_when_nothing_discountable(self, sale_service, sample_catalog):
        """Test updating a nails-only sale's discount stores zero."""
        lines = sale_service.build_lines([("Manicure", None)])
        sale_id = sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", lines)
        sale_service.update_sale(sale_id, discount=Decimal("15"))
        assert sale_service.get_sale(sale_id).discount == Decimal("0")

    def test_update_discount_kept_on_legacy_sale(self, sale_service):
        sale_id = sale_service.add_single_service_sale(
            "Priya", "111", "2025-03-15", "Threading", Decimal("200"), "Cash"
        )
        sale_service.update_sale(sale_id, discount=Decimal("15"))
        assert sale_service.get_sale(sale_id).discount == Decimal("15")

    def test_update_validates(self, sale_service, sample_catalog):
        lines = sale_service.build_lines([("Haircut", None)])
        sale_id = sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", lines)
        with pytest.raises(ValidationError):
            sale_service.update_sale(sale_id, date="yesterday")

    def test_delete_sale(self, sale_service, sample_catalog):
        lines = sale_service.build_lines([("Haircut", None)])
        sale_id = sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", lines)
        sale_service.delete_sale(sale_id)
        with pytest.raises(NotFoundError):
            sale_service.get_sale(sale_id)
        with pytest.raises(NotFoundError):
            sale_service.delete_sale(sale_id)

    def test_list_sales_by_period(self, sale_service, sample_catalog, today):
        lines = sale_service.build_lines([("Haircut", None)])
        sale_service.add_sale("Priya", "111", "2025-03-15", "Cash", lines)
        sale_service.add_sale("Meena", "222", "2025-03-01", "Cash", lines)
        assert [s.name for s in sale_service.list_sales("today", today=today)] == ["Priya"]
        assert [s.name for s in sale_service.list_sales("all")] == ["Meena", "Priya"]
