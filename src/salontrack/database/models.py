"""SQLAlchemy models for salontrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


class Sale(Base):
    """Sale (appointment) model.

    ``service`` is only set on legacy single-service rows; current rows keep
    their services in ``lines``.
    """

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False, index=True)
    service = Column(String, nullable=True)
    stylist = Column(String, nullable=True)
    date = Column(String(10), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(5, 2), nullable=False, default=0)
    payment_method = Column(String, nullable=False)
    timestamp = Column(String, default=now_iso, nullable=False)

    # Relationships
    lines = relationship(
        "SaleServiceLine",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleServiceLine.position",
    )


class SaleServiceLine(Base):
    """One service performed within a sale."""

    __tablename__ = "sale_service_lines"

    id = Column(Integer, primary_key=True)
    sale_id = Column(Integer, ForeignKey("sales.id"), nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    stylist = Column(String, nullable=True)
    category = Column(String, nullable=True)
    group_id = Column(Integer, nullable=True)

    # Relationships
    sale = relationship("Sale", back_populates="lines")


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    item = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(String(10), nullable=False, index=True)
    timestamp = Column(String, default=now_iso, nullable=False)


class Product(Base):
    """Inventory product model."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    expiry_date = Column(String(10), nullable=True)
    timestamp = Column(String, default=now_iso, nullable=False)

    # Relationships
    transactions = relationship(
        "StockTransaction", back_populates="product", cascade="all, delete-orphan"
    )


class StockTransaction(Base):
    """Stock log entry. Insertion order (id) breaks same-date ties."""

    __tablename__ = "stock_transactions"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    date = Column(String(10), nullable=False)
    type = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    timestamp = Column(String, default=now_iso, nullable=False)

    # Relationships
    product = relationship("Product", back_populates="transactions")


class ServiceGroup(Base):
    """Service group model."""

    __tablename__ = "service_groups"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    category = Column(String, nullable=False)
    order = Column(Integer, nullable=False, default=0)

    # Relationships
    services = relationship("Service", back_populates="group")


class Service(Base):
    """Catalog service model."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    group_id = Column(Integer, ForeignKey("service_groups.id"), nullable=True)

    __table_args__ = (UniqueConstraint("name", "category", name="uq_service_name_category"),)

    # Relationships
    group = relationship("ServiceGroup", back_populates="services")


class Stylist(Base):
    """Stylist model."""

    __tablename__ = "stylists"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    gender = Column(String, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
