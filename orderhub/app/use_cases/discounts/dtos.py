"""
Discount Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from orderhub.domain.entities import DiscountStatus


class RequestDiscountCommand(BaseModel):
    customer_id: int
    price_level_id: int
    notes: Optional[str] = None


class DiscountAssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    customer_id: int
    price_level_id: int
    status: DiscountStatus
    notes: Optional[str] = None
    requested_at: datetime
    decided_at: Optional[datetime] = None


class DiscountAssignmentListResponse(BaseModel):
    items: List[DiscountAssignmentResponse]
    total: int
    offset: int
    limit: Optional[int] = None
