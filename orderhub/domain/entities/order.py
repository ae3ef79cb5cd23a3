"""
Order and OrderProduct Entities

An order owns line items that snapshot catalog data at creation time.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import OrderStatus


class Order(SQLModel, table=True):
    """
    Order entity - customer order within a hub.

    Business Rules:
    - reference is unique within a hub when present
    - total_cents always equals the sum of its lines (price_cents * quantity)
    - Status follows draft -> pending -> processing -> completed, or cancelled
    """

    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)
    customer_id: Optional[int] = Field(
        default=None, foreign_key="customers.id", ondelete="SET NULL"
    )
    reference: Optional[str] = Field(default=None, max_length=128)

    status: OrderStatus = Field(default=OrderStatus.draft)
    notes: Optional[str] = None

    total_cents: int = Field(default=0)
    currency: str = Field(max_length=3)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_order_hub_reference", "hub_id", "reference", unique=True),
        Index("idx_order_status", "status"),
        Index("idx_order_created_at", "created_at"),
        CheckConstraint(
            "status IN ('draft', 'pending', 'processing', 'completed', 'cancelled')",
            name="ck_order_status",
        ),
    )


class OrderProduct(SQLModel, table=True):
    """
    OrderProduct entity - frozen copy of a catalog item on an order.

    Business Rules:
    - name, sku, description, price_cents and currency are written once
    - product_id is a weak reference; the line survives product deletion
    - quantity is always positive
    """

    __tablename__ = "order_products"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", ondelete="CASCADE", nullable=False)
    product_id: Optional[int] = Field(
        default=None, foreign_key="products.id", ondelete="SET NULL"
    )

    # Snapshot
    name: str = Field(max_length=255)
    sku: Optional[str] = Field(default=None, max_length=128)
    description: Optional[str] = None
    price_cents: int = Field(nullable=False)
    currency: str = Field(max_length=3)
    quantity: int = Field(nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_order_product_order", "order_id"),
        CheckConstraint("quantity > 0", name="ck_order_product_quantity_positive"),
    )

    @property
    def line_total_cents(self) -> int:
        return self.price_cents * self.quantity
