"""
Product Use Cases

Catalog management: create, update, delete, list and CSV import.
"""

from .create_product_use_case import CreateProductUseCase
from .delete_product_use_case import DeleteProductUseCase
from .dtos import (
    CreateProductCommand,
    DeleteProductResponse,
    ImportProductsResponse,
    ProductListResponse,
    ProductPriceInput,
    ProductPriceResponse,
    ProductResponse,
    UpdateProductCommand,
)
from .get_product_use_case import GetProductUseCase
from .import_products_use_case import ImportProductsUseCase
from .list_products_use_case import ListProductsUseCase
from .update_product_use_case import UpdateProductUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ImportProductsUseCase",
    "ListProductsUseCase",
    "UpdateProductUseCase",
    "CreateProductCommand",
    "DeleteProductResponse",
    "ImportProductsResponse",
    "ProductListResponse",
    "ProductPriceInput",
    "ProductPriceResponse",
    "ProductResponse",
    "UpdateProductCommand",
]
