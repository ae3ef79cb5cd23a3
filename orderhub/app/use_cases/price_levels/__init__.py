"""
Price Level Use Cases
"""

from .create_price_level_use_case import CreatePriceLevelUseCase
from .delete_price_level_use_case import DeletePriceLevelUseCase
from .dtos import (
    CreatePriceLevelCommand,
    DeletePriceLevelResponse,
    PriceLevelListResponse,
    PriceLevelResponse,
    UpdatePriceLevelCommand,
)
from .list_price_levels_use_case import ListPriceLevelsUseCase
from .update_price_level_use_case import UpdatePriceLevelUseCase

__all__ = [
    "CreatePriceLevelUseCase",
    "DeletePriceLevelUseCase",
    "ListPriceLevelsUseCase",
    "UpdatePriceLevelUseCase",
    "CreatePriceLevelCommand",
    "DeletePriceLevelResponse",
    "PriceLevelListResponse",
    "PriceLevelResponse",
    "UpdatePriceLevelCommand",
]
