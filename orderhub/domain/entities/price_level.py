"""
PriceLevel Entity

A named pricing tier such as "Retail" or "Wholesale".
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class PriceLevel(SQLModel, table=True):
    """PriceLevel entity - pricing tier, name unique per hub"""

    __tablename__ = "price_levels"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)
    name: str = Field(max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_price_level_hub_name", "hub_id", "name", unique=True),)
