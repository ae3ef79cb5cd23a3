from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from orderhub.app.repositories.queries import TagListQuery
from orderhub.domain.entities import Tag


class ITagRepository(ABC):
    """Tag repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, tag_id: int) -> Optional[Tag]:
        pass

    @abstractmethod
    async def get_by_name(self, hub_id: int, name: str) -> Optional[Tag]:
        """Case-insensitive lookup by name"""
        pass

    @abstractmethod
    async def get_many(self, hub_id: int, tag_ids: Sequence[int]) -> List[Tag]:
        """Tags of the hub whose id is in tag_ids"""
        pass

    @abstractmethod
    async def list(self, query: TagListQuery) -> Tuple[int, List[Tag]]:
        pass

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        pass

    @abstractmethod
    async def update(self, tag: Tag) -> Tag:
        pass

    @abstractmethod
    async def delete(self, tag: Tag) -> None:
        """Delete a tag and its product links"""
        pass
