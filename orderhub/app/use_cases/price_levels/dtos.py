"""
Price Level Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CreatePriceLevelCommand(BaseModel):
    name: str


class UpdatePriceLevelCommand(BaseModel):
    name: str


class PriceLevelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    name: str
    created_at: datetime
    updated_at: datetime


class PriceLevelListResponse(BaseModel):
    items: List[PriceLevelResponse]
    total: int
    offset: int
    limit: Optional[int] = None


class DeletePriceLevelResponse(BaseModel):
    status: str
    price_level_id: int
