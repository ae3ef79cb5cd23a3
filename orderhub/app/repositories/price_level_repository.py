from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from orderhub.app.repositories.queries import PriceLevelListQuery
from orderhub.domain.entities import PriceLevel


class IPriceLevelRepository(ABC):
    """PriceLevel repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, price_level_id: int) -> Optional[PriceLevel]:
        pass

    @abstractmethod
    async def get_by_name(self, hub_id: int, name: str) -> Optional[PriceLevel]:
        """Case-insensitive lookup by name"""
        pass

    @abstractmethod
    async def list(self, query: PriceLevelListQuery) -> Tuple[int, List[PriceLevel]]:
        pass

    @abstractmethod
    async def create(self, price_level: PriceLevel) -> PriceLevel:
        pass

    @abstractmethod
    async def update(self, price_level: PriceLevel) -> PriceLevel:
        pass

    @abstractmethod
    async def delete(self, price_level: PriceLevel) -> None:
        """
        Delete a price level.

        Removes its product prices and discount assignments and clears it
        from customers.
        """
        pass
