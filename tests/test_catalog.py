"""Tests for the service menu and staff."""

import pytest
from decimal import Decimal

from salontrack.domain.errors import ConflictError, DependencyError, NotFoundError, ValidationError


class TestServiceGroups:
    """Tests for service groups."""

    def test_order_appends(self, catalog_service):
        """Test groups get increasing display order."""
        catalog_service.add_service_group("Hair")
        catalog_service.add_service_group("Skin", category="women")
        groups = catalog_service.list_service_groups()
        assert [(g.name, g.order) for g in groups] == [("Hair", 1), ("Skin", 2)]

    def test_explicit_order(self, catalog_service):
        catalog_service.add_service_group("Hair", order=5)
        catalog_service.add_service_group("Nails", order=1)
        assert [g.name for g in catalog_service.list_service_groups()] == ["Nails", "Hair"]

    def test_duplicate_group(self, catalog_service):
        catalog_service.add_service_group("Hair")
        with pytest.raises(ConflictError):
            catalog_service.add_service_group("hair")

    def test_invalid_category(self, catalog_service):
        with pytest.raises(ValidationError):
            catalog_service.add_service_group("Hair", category="kids")

    def test_delete_group_in_use(self, catalog_service, sample_catalog):
        """Test a group with services cannot be deleted."""
        with pytest.raises(DependencyError):
            catalog_service.delete_service_group(sample_catalog["nails"])

    def test_delete_unused_group(self, catalog_service):
        group_id = catalog_service.add_service_group("Makeup")
        catalog_service.delete_service_group(group_id)
        assert catalog_service.find_service_group("Makeup") is None

    def test_delete_missing_group(self, catalog_service):
        with pytest.raises(NotFoundError):
            catalog_service.delete_service_group(99)


class TestServices:
    """Tests for catalog services."""

    def test_add_and_find(self, catalog_service, sample_catalog):
        service = catalog_service.find_service("haircut")
        assert service is not None
        assert service.price == Decimal("500")
        assert service.group_id == sample_catalog["hair"]

    def test_same_name_other_category(self, catalog_service, sample_catalog):
        """Test a name may repeat across categories."""
        catalog_service.add_service("Haircut", "men", Decimal("300"))
        assert catalog_service.find_service("Haircut", category="men").price == Decimal("300")
        with pytest.raises(ConflictError):
            catalog_service.add_service("Haircut", "men", Decimal("350"))

    def test_unknown_group(self, catalog_service):
        with pytest.raises(NotFoundError):
            catalog_service.add_service("Facial", "women", Decimal("600"), group_name="Skin")

    def test_negative_price(self, catalog_service):
        with pytest.raises(ValidationError):
            catalog_service.add_service("Facial", "women", Decimal("-1"))

    def test_update_price(self, catalog_service, sample_catalog):
        service = catalog_service.find_service("Haircut")
        catalog_service.update_service_price(service.id, Decimal("550"))
        assert catalog_service.find_service("Haircut").price == Decimal("550")

    def test_list_by_category(self, catalog_service, sample_catalog):
        catalog_service.add_service("Beard Trim", "men", Decimal("150"))
        assert [s.name for s in catalog_service.list_services("men")] == ["Beard Trim"]

    def test_delete_service(self, catalog_service, sample_catalog):
        service = catalog_service.find_service("Manicure")
        catalog_service.delete_service(service.id)
        assert catalog_service.find_service("Manicure") is None
        catalog_service.delete_service_group(sample_catalog["nails"])


class TestStylists:
    """Tests for stylists."""

    def test_list_and_filter(self, catalog_service, sample_catalog):
        assert [s.name for s in catalog_service.list_stylists()] == ["Asha", "Ravi"]
        assert [s.name for s in catalog_service.list_stylists("male")] == ["Ravi"]

    def test_duplicate_stylist(self, catalog_service, sample_catalog):
        with pytest.raises(ConflictError):
            catalog_service.add_stylist("asha", "female")

    def test_invalid_gender(self, catalog_service):
        with pytest.raises(ValidationError):
            catalog_service.add_stylist("Kiran", "other")

    def test_delete_stylist(self, catalog_service, sample_catalog):
        stylist = catalog_service.list_stylists("male")[0]
        catalog_service.delete_stylist(stylist.id)
        assert [s.name for s in catalog_service.list_stylists()] == ["Asha"]
