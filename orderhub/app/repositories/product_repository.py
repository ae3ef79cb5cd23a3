from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from orderhub.app.repositories.queries import ProductListQuery
from orderhub.domain.entities import Product, ProductPriceLevel, ProductTag


class IProductRepository(ABC):
    """Product repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, product_id: int) -> Optional[Product]:
        """Get product by ID within a hub"""
        pass

    @abstractmethod
    async def get_by_sku(self, hub_id: int, sku: str) -> Optional[Product]:
        """Get product by SKU within a hub"""
        pass

    @abstractmethod
    async def list(self, query: ProductListQuery) -> Tuple[int, List[Product]]:
        """Return (total, page) of products matching the query"""
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Create a new product"""
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Update existing product"""
        pass

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """
        Delete a product with its price mappings and tag links.

        Order lines that reference it keep their snapshot and lose product_id.
        """
        pass

    @abstractmethod
    async def get_price(
        self, product_id: int, price_level_id: int
    ) -> Optional[ProductPriceLevel]:
        """Get the price of a product at one price level"""
        pass

    @abstractmethod
    async def list_prices(self, product_ids: Sequence[int]) -> List[ProductPriceLevel]:
        """Get all price mappings of the given products"""
        pass

    @abstractmethod
    async def replace_prices(
        self, product_id: int, prices: Sequence[ProductPriceLevel]
    ) -> List[ProductPriceLevel]:
        """Replace every price mapping of a product"""
        pass

    @abstractmethod
    async def list_tags(self, product_ids: Sequence[int]) -> List[ProductTag]:
        """Get tag links of the given products"""
        pass

    @abstractmethod
    async def replace_tags(self, product_id: int, tag_ids: Sequence[int]) -> None:
        """Replace every tag link of a product"""
        pass
