"""
Product Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductPriceInput(BaseModel):
    price_level_id: int
    price_cents: int


class CreateProductCommand(BaseModel):
    name: str
    currency: str
    sku: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    tag_ids: List[int] = Field(default_factory=list)
    prices: List[ProductPriceInput] = Field(default_factory=list)


class UpdateProductCommand(BaseModel):
    """
    Partial update; only fields the caller sent are applied.

    tag_ids and prices, when sent, replace the product's full set.
    """

    name: Optional[str] = None
    currency: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    is_archived: Optional[bool] = None
    tag_ids: Optional[List[int]] = None
    prices: Optional[List[ProductPriceInput]] = None


class ProductPriceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    price_level_id: int
    price_cents: int


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    hub_id: int
    name: str
    sku: Optional[str] = None
    description: Optional[str] = None
    currency: str
    is_archived: bool
    category_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
    prices: List[ProductPriceResponse] = []
    tag_ids: List[int] = []


class ProductListResponse(BaseModel):
    items: List[ProductResponse]
    total: int
    offset: int
    limit: Optional[int] = None


class DeleteProductResponse(BaseModel):
    status: str
    product_id: int


class ImportProductsResponse(BaseModel):
    created: int
    products: List[ProductResponse]
