from abc import ABC, abstractmethod
from typing import List, Optional

from orderhub.domain.entities import Category


class ICategoryRepository(ABC):
    """Category repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, category_id: int) -> Optional[Category]:
        pass

    @abstractmethod
    async def get_by_name(
        self, hub_id: int, parent_id: Optional[int], name: str
    ) -> Optional[Category]:
        """Get a sibling category by name (parent_id None means root)"""
        pass

    @abstractmethod
    async def list_all(self, hub_id: int, include_archived: bool = True) -> List[Category]:
        """All categories of a hub ordered by id"""
        pass

    @abstractmethod
    async def create(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def update(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def delete(self, category: Category) -> None:
        """Delete a category, detaching its children and products"""
        pass
