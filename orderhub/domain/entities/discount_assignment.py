"""
DiscountAssignment Entity

Approval record granting a customer a price level.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import DiscountStatus


class DiscountAssignment(SQLModel, table=True):
    """
    DiscountAssignment entity - (customer, price level) approval.

    Business Rules:
    - One assignment per (customer_id, price_level_id)
    - requested -> approved | rejected; both outcomes are final
    - Only orders managers decide
    - Only approved assignments are visible to price resolution
    """

    __tablename__ = "discount_assignments"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)
    customer_id: int = Field(foreign_key="customers.id", ondelete="CASCADE", nullable=False)
    price_level_id: int = Field(
        foreign_key="price_levels.id", ondelete="CASCADE", nullable=False
    )

    status: DiscountStatus = Field(default=DiscountStatus.requested)
    notes: Optional[str] = None

    requested_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    decided_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_discount_customer_level", "customer_id", "price_level_id", unique=True),
        Index("idx_discount_status", "status"),
    )
