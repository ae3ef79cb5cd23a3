"""
Hub Orders Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import DiscountStatus, OrderStatus, ORDER_STATUS_SEQUENCE

# Export all entities
from .category import Category
from .customer import Customer
from .discount_assignment import DiscountAssignment
from .order import Order, OrderProduct
from .price_level import PriceLevel
from .product import Product
from .product_price_level import ProductPriceLevel
from .tag import ProductTag, Tag

__all__ = [
    # Enums
    "DiscountStatus",
    "OrderStatus",
    "ORDER_STATUS_SEQUENCE",
    # Entities
    "Category",
    "Customer",
    "DiscountAssignment",
    "Order",
    "OrderProduct",
    "PriceLevel",
    "Product",
    "ProductPriceLevel",
    "ProductTag",
    "Tag",
]
