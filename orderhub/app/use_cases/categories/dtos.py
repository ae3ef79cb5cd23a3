"""
Category Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CreateCategoryCommand(BaseModel):
    name: str
    parent_id: Optional[int] = None
    description: Optional[str] = None


class UpdateCategoryCommand(BaseModel):
    """Partial update; only fields the caller sent are applied"""

    name: Optional[str] = None
    parent_id: Optional[int] = None
    description: Optional[str] = None
    is_archived: Optional[bool] = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    parent_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    is_archived: bool
    created_at: datetime
    updated_at: datetime


class CategoryNode(BaseModel):
    """Category with its children, as returned by the tree listing"""

    id: int
    parent_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    is_archived: bool
    children: List["CategoryNode"] = []


class DeleteCategoryResponse(BaseModel):
    status: str
    category_id: int


CategoryNode.model_rebuild()
