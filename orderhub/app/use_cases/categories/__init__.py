from .create_category_use_case import CreateCategoryUseCase
from .delete_category_use_case import DeleteCategoryUseCase
from .dtos import (
    CategoryNode,
    CategoryResponse,
    CreateCategoryCommand,
    DeleteCategoryResponse,
    UpdateCategoryCommand,
)
from .list_categories_use_case import ListCategoriesUseCase
from .update_category_use_case import UpdateCategoryUseCase

__all__ = [
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "ListCategoriesUseCase",
    "UpdateCategoryUseCase",
    "CategoryNode",
    "CategoryResponse",
    "CreateCategoryCommand",
    "DeleteCategoryResponse",
    "UpdateCategoryCommand",
]
