"""
Tag Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class TagCommand(BaseModel):
    name: str


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    name: str
    created_at: datetime


class TagListResponse(BaseModel):
    items: List[TagResponse]
    total: int
    offset: int
    limit: Optional[int] = None


class DeleteTagResponse(BaseModel):
    status: str
    tag_id: int
