"""
ProductPriceLevel Entity

Binds a product to a price level with a price in minor units.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class ProductPriceLevel(SQLModel, table=True):
    """
    ProductPriceLevel entity - price of one product at one price level.

    Business Rules:
    - (product_id, price_level_id) is unique
    - price_cents is never negative
    - Deleted together with either the product or the price level
    """

    __tablename__ = "product_price_levels"

    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(foreign_key="products.id", ondelete="CASCADE", nullable=False)
    price_level_id: int = Field(
        foreign_key="price_levels.id", ondelete="CASCADE", nullable=False
    )
    price_cents: int = Field(nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_ppl_product_level", "product_id", "price_level_id", unique=True),
        Index("idx_ppl_price_level", "price_level_id"),
        CheckConstraint("price_cents >= 0", name="ck_ppl_price_non_negative"),
    )
