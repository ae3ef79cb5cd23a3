"""
List query value objects shared by repository contracts.

Every list is hub-scoped, optionally searched, and paged by offset/limit.
Implementations order rows by id ascending so that concurrent inserts only
ever append to the last page.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from orderhub.domain.entities import DiscountStatus, OrderStatus


class ListQuery(BaseModel):
    hub_id: int
    search: Optional[str] = None
    offset: int = Field(default=0, ge=0)
    limit: Optional[int] = Field(default=None, ge=1)

    @field_validator("search")
    @classmethod
    def _blank_search_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class OrderListQuery(ListQuery):
    status: Optional[OrderStatus] = None
    customer_id: Optional[int] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None


class ProductListQuery(ListQuery):
    include_archived: bool = False
    category_id: Optional[int] = None
    tag_id: Optional[int] = None
    sku: Optional[str] = None


class PriceLevelListQuery(ListQuery):
    pass


class TagListQuery(ListQuery):
    pass


class CustomerListQuery(ListQuery):
    price_level_id: Optional[int] = None


class DiscountAssignmentListQuery(ListQuery):
    status: Optional[DiscountStatus] = None
    customer_id: Optional[int] = None

