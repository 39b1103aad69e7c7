"""Shared pytest fixtures for salontrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from salontrack.database.factories import create_sqlite_database
from salontrack.domain.analytics import AnalyticsService
from salontrack.domain.catalog import CatalogService
from salontrack.domain.clients import ClientService
from salontrack.domain.entities import LegacySale, MultiServiceSale, ServiceLine
from salontrack.domain.expenses import ExpenseService
from salontrack.domain.inventory import InventoryService
from salontrack.domain.sales import SaleService

TODAY = date(2025, 3, 15)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def today():
    """Fixed reference day for preset ranges."""
    return TODAY


@pytest.fixture
def catalog_service(temp_db):
    """Create a CatalogService with a temporary database."""
    return CatalogService(temp_db)


@pytest.fixture
def sale_service(temp_db):
    """Create a SaleService with a temporary database."""
    return SaleService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def inventory_service(temp_db):
    """Create an InventoryService with a temporary database."""
    return InventoryService(temp_db)


@pytest.fixture
def analytics_service(temp_db):
    """Create an AnalyticsService with a temporary database."""
    return AnalyticsService(temp_db)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def sample_catalog(catalog_service):
    """Create groups, services and stylists used across tests.

    Nails is a non-discountable group; Hair is discountable.
    """
    hair_id = catalog_service.add_service_group("Hair", category="both")
    nails_id = catalog_service.add_service_group("Nails", category="women")
    catalog_service.add_service("Haircut", "women", Decimal("500"), group_name="Hair")
    catalog_service.add_service("Hair Spa", "women", Decimal("800"), group_name="Hair")
    catalog_service.add_service("Manicure", "women", Decimal("400"), group_name="Nails")
    catalog_service.add_stylist("Asha", "female")
    catalog_service.add_stylist("Ravi", "male")
    return {"hair": hair_id, "nails": nails_id}


def make_sale(
    sale_id=1,
    name="Priya",
    phone="9876543210",
    sale_date="2025-03-15",
    lines=(),
    amount=None,
    discount="0",
    payment_method="Cash",
    stylist=None,
):
    """Build a MultiServiceSale without touching the database."""
    services = tuple(
        ServiceLine(
            name=line[0],
            price=Decimal(str(line[1])),
            stylist=line[2] if len(line) > 2 else None,
            group_id=line[3] if len(line) > 3 else None,
        )
        for line in lines
    )
    if amount is None:
        amount = sum((line.price for line in services), Decimal("0"))
    return MultiServiceSale(
        id=sale_id,
        name=name,
        phone=phone,
        services=services,
        date=sale_date,
        amount=Decimal(str(amount)),
        discount=Decimal(discount),
        payment_method=payment_method,
        timestamp="2025-03-15T10:00:00+00:00",
        stylist=stylist,
    )


def make_legacy_sale(
    sale_id=1,
    name="Priya",
    phone="9876543210",
    sale_date="2025-03-15",
    service="Haircut",
    amount="500",
    discount="0",
    payment_method="Cash",
    stylist=None,
):
    """Build a LegacySale without touching the database."""
    return LegacySale(
        id=sale_id,
        name=name,
        phone=phone,
        service=service,
        stylist=stylist,
        date=sale_date,
        amount=Decimal(amount),
        discount=Decimal(discount),
        payment_method=payment_method,
        timestamp="2025-03-15T10:00:00+00:00",
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
