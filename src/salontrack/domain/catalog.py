"""Catalog domain service: services, service groups and stylists."""

import logging
from decimal import Decimal
from typing import Optional

from salontrack.database.base import Database
from salontrack.domain.entities import Service, ServiceGroup, Stylist
from salontrack.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    duplicate_name,
    entity_not_found,
    group_in_use,
)

logger = logging.getLogger(__name__)

GROUP_CATEGORIES = ("men", "women", "both")
SERVICE_CATEGORIES = ("men", "women")
GENDERS = ("male", "female")


def _require_name(name: str, kind: str) -> str:
    if not name or not name.strip():
        raise ValidationError(f"Please enter {kind} name")
    return name.strip()


def _require_choice(value: str, choices: tuple[str, ...], field: str) -> str:
    value = value.strip().lower()
    if value not in choices:
        raise ValidationError(
            f"Invalid {field} '{value}'. Supported: {', '.join(choices)}"
        )
    return value


class CatalogService:
    """Service for managing the salon's service menu and staff."""

    def __init__(self, db: Database):
        """Initialize catalog service.

        Args:
            db: Database instance
        """
        self.db = db

    # Service groups
    def add_service_group(
        self, name: str, category: str = "both", order: Optional[int] = None
    ) -> int:
        """Create a service group.

        Args:
            name: Group name
            category: men, women or both
            order: Display position; appended after existing groups if None

        Returns:
            Service group ID

        Raises:
            ValidationError: If name or category is invalid
            ConflictError: If a group with the name exists
        """
        name = _require_name(name, "group")
        category = _require_choice(category, GROUP_CATEGORIES, "category")

        groups = self.db.list_service_groups()
        if any(g.name.lower() == name.lower() for g in groups):
            raise ConflictError(duplicate_name("Service group", name))
        if order is None:
            order = max((g.order for g in groups), default=0) + 1

        return self.db.create_service_group(name=name, category=category, order=order)

    def list_service_groups(self) -> list[ServiceGroup]:
        """List service groups in display order."""
        return self.db.list_service_groups()

    def find_service_group(self, name: str) -> Optional[ServiceGroup]:
        """Find a group by name, case-insensitive."""
        wanted = name.strip().lower()
        for group in self.db.list_service_groups():
            if group.name.lower() == wanted:
                return group
        return None

    def delete_service_group(self, group_id: int) -> None:
        """Delete a service group that no service uses."""
        if self.db.get_service_group(group_id) is None:
            raise NotFoundError(entity_not_found("Service group", group_id))
        in_use = self.db.count_services_in_group(group_id)
        if in_use:
            raise DependencyError(group_in_use(group_id, in_use))
        self.db.delete_service_group(group_id)

    # Services
    def add_service(
        self,
        name: str,
        category: str,
        price: Decimal,
        group_name: Optional[str] = None,
    ) -> int:
        """Create a catalog service.

        Raises:
            ValidationError: If fields are invalid
            NotFoundError: If group_name doesn't exist
            ConflictError: If the name already exists in the category
        """
        name = _require_name(name, "service")
        category = _require_choice(category, SERVICE_CATEGORIES, "category")
        if price < 0:
            raise ValidationError("Price cannot be negative")

        group_id = None
        if group_name is not None:
            group = self.find_service_group(group_name)
            if group is None:
                raise NotFoundError(f"Service group '{group_name}' not found")
            group_id = group.id

        for existing in self.db.list_services():
            if existing.name.lower() == name.lower() and existing.category == category:
                raise ConflictError(duplicate_name("Service", name))

        return self.db.create_service(
            name=name, category=category, price=price, group_id=group_id
        )

    def list_services(self, category: Optional[str] = None) -> list[Service]:
        """List catalog services, optionally for one category."""
        services = self.db.list_services()
        if category is None:
            return services
        return [s for s in services if s.category == category]

    def find_service(self, name: str, category: Optional[str] = None) -> Optional[Service]:
        """Find a catalog service by name, case-insensitive.

        When the name exists in several categories and none is given, the
        first by category order wins.
        """
        wanted = name.strip().lower()
        for service in self.list_services(category):
            if service.name.lower() == wanted:
                return service
        return None

    def update_service_price(self, service_id: int, price: Decimal) -> None:
        """Change a service's list price."""
        if price < 0:
            raise ValidationError("Price cannot be negative")
        self.db.update_service_price(service_id, price)

    def delete_service(self, service_id: int) -> None:
        """Delete a catalog service."""
        self.db.delete_service(service_id)

    # Stylists
    def add_stylist(self, name: str, gender: str) -> int:
        """Create a stylist.

        Raises:
            ValidationError: If name or gender is invalid
            ConflictError: If a stylist with the name exists
        """
        name = _require_name(name, "stylist")
        gender = _require_choice(gender, GENDERS, "gender")
        if any(s.name.lower() == name.lower() for s in self.db.list_stylists()):
            raise ConflictError(duplicate_name("Stylist", name))
        stylist_id = self.db.create_stylist(name=name, gender=gender)
        logger.info("Added stylist %s", name)
        return stylist_id

    def list_stylists(self, gender: Optional[str] = None) -> list[Stylist]:
        """List stylists by name, optionally filtered by gender."""
        stylists = self.db.list_stylists()
        if gender is None:
            return stylists
        return [s for s in stylists if s.gender == gender]

    def delete_stylist(self, stylist_id: int) -> None:
        """Delete a stylist. Past sales keep the stylist's name."""
        self.db.delete_stylist(stylist_id)
