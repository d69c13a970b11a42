"""Relational schema for the catalog, the order ledger and user profiles."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    TypeDecorator,
    func,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class DecimalString(TypeDecorator):
    """Exact decimal stored as text.

    SQLite has no native decimal type and would round-trip NUMERIC
    through float; text keeps every cent exact on every backend.
    """

    impl = String(32)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class ProductRow(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    category = Column(String(50), nullable=False, default="")
    sub_category = Column(String(50), nullable=False, default="")
    price = Column(DecimalString, nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    image_path = Column(String(500), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    stock = Column(Integer, nullable=False, default=0)
    created_date = Column(DateTime, nullable=False, default=func.now())

    __table_args__ = (
        CheckConstraint("stock >= 0", name="check_stock_non_negative"),
    )


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(String(254), nullable=False, unique=True)
    full_name = Column(String(200), nullable=False, default="")
    address = Column(Text, nullable=False, default="")
    is_admin = Column(Boolean, nullable=False, default=False)
    created_date = Column(DateTime, nullable=False, default=func.now())


class OrderRow(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Principals come from the identity provider; no foreign key to users.
    user_id = Column(String(64), nullable=False, index=True)
    order_date = Column(DateTime(timezone=True), nullable=False)
    total_amount = Column(DecimalString, nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    status = Column(String(20), nullable=False, default="Pending")
    shipping_address = Column(Text, nullable=False, default="")

    items = relationship(
        "OrderItemRow",
        order_by="OrderItemRow.id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class OrderItemRow(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True)
    product_name = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(DecimalString, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_quantity_positive"),
    )
