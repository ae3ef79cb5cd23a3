"""
Order Use Case DTOs (Data Transfer Objects)

Commands carry caller intent into the order use cases; responses are the
structured output handed back to the API layer.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from orderhub.domain.entities import OrderStatus


# ============================================================================
# Command DTOs
# ============================================================================


class OrderLineCommand(BaseModel):
    """
    One line to add to an order.

    Catalog line: product_id set; price always comes from price resolution
    and price_cents must be left unset. Ad-hoc line: product_id unset; name
    and price_cents are required.
    """

    product_id: Optional[int] = None
    quantity: int
    price_level_id: Optional[int] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    price_cents: Optional[int] = None
    currency: Optional[str] = None


class CreateOrderCommand(BaseModel):
    customer_id: Optional[int] = None
    reference: Optional[str] = None
    notes: Optional[str] = None
    currency: Optional[str] = None
    status: OrderStatus = OrderStatus.draft
    lines: List[OrderLineCommand] = []

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value):
        # "Pending", "PENDING" and "pending" are the same status
        if isinstance(value, str):
            return OrderStatus(value)
        return value


class UpdateOrderCommand(BaseModel):
    """Only fields explicitly set are applied (model_fields_set)"""

    customer_id: Optional[int] = None
    reference: Optional[str] = None
    notes: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class OrderLineResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    product_id: Optional[int]
    name: str
    sku: Optional[str]
    description: Optional[str]
    price_cents: int
    currency: str
    quantity: int
    line_total_cents: int
    created_at: datetime


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    customer_id: Optional[int]
    reference: Optional[str]
    status: OrderStatus
    notes: Optional[str]
    total_cents: int
    currency: str
    created_at: datetime
    updated_at: datetime
    lines: List[OrderLineResponse] = []


class OrderListResponse(BaseModel):
    items: List[OrderResponse]
    total: int
    offset: int
    limit: Optional[int]


class DeleteOrderResponse(BaseModel):
    status: str
    order_id: int


def build_order_response(order, lines=()) -> OrderResponse:
    response = OrderResponse.model_validate(order)
    response.lines = [OrderLineResponse.model_validate(line) for line in lines]
    return response
