"""Tests for discount and final amount calculation."""

from decimal import Decimal

from conftest import make_legacy_sale, make_sale
from salontrack.domain.entities import ServiceGroup
from salontrack.domain.revenue import (
    allows_discount,
    discount_amount,
    discountable_amount,
    final_amount,
    is_non_discountable_group,
    non_discountable_group_ids,
)

HAIR = 1
NAILS = 2
EXCLUDED = frozenset({NAILS})


def test_non_discountable_group_names():
    """Test group name matching is trimmed and case-insensitive."""
    assert is_non_discountable_group("Nails")
    assert is_non_discountable_group("  THREADING ")
    assert not is_non_discountable_group("Hair")


def test_non_discountable_group_ids():
    """Test collecting exempt group IDs."""
    groups = [
        ServiceGroup(id=1, name="Hair", category="both", order=1),
        ServiceGroup(id=2, name="nails", category="women", order=2),
        ServiceGroup(id=3, name="Threading", category="women", order=3),
    ]
    assert non_discountable_group_ids(groups) == frozenset({2, 3})


def test_discount_only_on_discountable_portion():
    """Test a 10% discount skips the nails service."""
    sale = make_sale(
        lines=[("Haircut", 600, "Asha", HAIR), ("Manicure", 400, "Ravi", NAILS)],
        discount="10",
    )
    assert discountable_amount(sale, EXCLUDED) == Decimal("600")
    assert discount_amount(sale, EXCLUDED) == Decimal("60")
    assert final_amount(sale, EXCLUDED) == Decimal("940")


def test_conservation():
    """Test final amount plus discount equals the pre-discount amount."""
    sale = make_sale(
        lines=[("Haircut", 500, None, HAIR), ("Manicure", 350, None, NAILS), ("Spa", 275, None, None)],
        discount="15",
    )
    assert final_amount(sale, EXCLUDED) + discount_amount(sale, EXCLUDED) == sale.amount


def test_line_without_group_is_discountable():
    """Test services with no group take the discount."""
    sale = make_sale(lines=[("Consultation", 200)], discount="50")
    assert final_amount(sale) == Decimal("100")


def test_all_exempt_sale_ignores_discount():
    """Test a sale of only exempt services keeps its full amount."""
    sale = make_sale(lines=[("Manicure", 400, None, NAILS)], discount="20")
    assert not allows_discount(sale, EXCLUDED)
    assert final_amount(sale, EXCLUDED) == Decimal("400")


def test_legacy_sale_whole_amount_discountable():
    """Test legacy sales discount their whole amount."""
    sale = make_legacy_sale(amount="1000", discount="10")
    assert discountable_amount(sale, EXCLUDED) == Decimal("1000")
    assert final_amount(sale, EXCLUDED) == Decimal("900")


def test_zero_discount():
    """Test a zero discount leaves the amount unchanged."""
    sale = make_sale(lines=[("Haircut", 500, None, HAIR)])
    assert final_amount(sale, EXCLUDED) == Decimal("500")
