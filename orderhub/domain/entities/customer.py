"""
Customer Entity

A buyer of a hub, optionally billed at an approved price level.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Customer(SQLModel, table=True):
    """
    Customer entity - buyer within a hub.

    Business Rules:
    - Email is unique within a hub (stored lowercased)
    - price_level_id is only honoured by pricing when an approved
      DiscountAssignment exists for it
    """

    __tablename__ = "customers"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)

    price_level_id: Optional[int] = Field(
        default=None, foreign_key="price_levels.id", ondelete="SET NULL"
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_customer_hub_email", "hub_id", "email", unique=True),
        Index("idx_customer_price_level", "price_level_id"),
    )
