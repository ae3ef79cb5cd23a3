"""
Product Entity

A catalog item sold by a hub. Prices live in ProductPriceLevel rows.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Product(SQLModel, table=True):
    """
    Product entity - catalog item of a hub.

    Business Rules:
    - SKU is unique within a hub when present
    - Archived products stay in the catalog but cannot be priced for new lines
    - category_id is nulled when the category is deleted
    """

    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)

    name: str = Field(max_length=255)
    sku: Optional[str] = Field(default=None, max_length=128)
    description: Optional[str] = None
    currency: str = Field(max_length=3)
    is_archived: bool = Field(default=False)

    category_id: Optional[int] = Field(
        default=None, foreign_key="categories.id", ondelete="SET NULL"
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_product_hub_sku", "hub_id", "sku", unique=True),
        Index("idx_product_is_archived", "is_archived"),
        Index("idx_product_category", "category_id"),
    )
