"""
Category Entity

Hierarchical grouping of products within a hub.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Category(SQLModel, table=True):
    """
    Category entity - node of the hub's category tree.

    Business Rules:
    - Name is unique among siblings (hub_id, parent_id)
    - Parent links never form a cycle
    - Deleting a category detaches its children instead of deleting them
    """

    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    hub_id: int = Field(nullable=False, index=True)
    parent_id: Optional[int] = Field(
        default=None, foreign_key="categories.id", ondelete="SET NULL"
    )
    name: str = Field(max_length=255)
    description: Optional[str] = None
    is_archived: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_category_hub_parent_name", "hub_id", "parent_id", "name", unique=True),
        Index("idx_category_parent", "parent_id"),
    )
