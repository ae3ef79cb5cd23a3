"""
Tag and ProductTag Entities

Free-form labels attached to products (many-to-many).
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Tag(SQLModel, table=True):
    """Tag entity - name unique per hub"""

    __tablename__ = "tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)
    name: str = Field(max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_tag_hub_name", "hub_id", "name", unique=True),)


class ProductTag(SQLModel, table=True):
    """ProductTag entity - join row, removed with either side"""

    __tablename__ = "product_tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(foreign_key="products.id", ondelete="CASCADE", nullable=False)
    tag_id: int = Field(foreign_key="tags.id", ondelete="CASCADE", nullable=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_product_tag_pair", "product_id", "tag_id", unique=True),
        Index("idx_product_tag_tag", "tag_id"),
    )
