"""
Customer Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CreateCustomerCommand(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None


class UpdateCustomerCommand(BaseModel):
    """Partial update; only fields the caller sent are applied"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    price_level_id: Optional[int] = None


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    name: str
    email: str
    phone: Optional[str] = None
    price_level_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class CustomerListResponse(BaseModel):
    items: List[CustomerResponse]
    total: int
    offset: int
    limit: Optional[int] = None


class DeleteCustomerResponse(BaseModel):
    status: str
    customer_id: int
