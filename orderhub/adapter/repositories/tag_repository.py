from typing import List, Optional, Sequence, Tuple

from sqlalchemy import delete, func
from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository, like_pattern
from orderhub.app.repositories.queries import TagListQuery
from orderhub.app.repositories.tag_repository import ITagRepository
from orderhub.domain.entities import ProductTag, Tag


class TagRepository(SqlModelRepository, ITagRepository):
    """Tag repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, tag_id: int) -> Optional[Tag]:
        stmt = select(Tag).where(Tag.id == tag_id, Tag.hub_id == hub_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, hub_id: int, name: str) -> Optional[Tag]:
        stmt = select(Tag).where(Tag.hub_id == hub_id, func.lower(Tag.name) == name.lower())
        result = await self._exec(stmt)
        return result.first()

    async def get_many(self, hub_id: int, tag_ids: Sequence[int]) -> List[Tag]:
        if not tag_ids:
            return []
        stmt = (
            select(Tag)
            .where(Tag.hub_id == hub_id, Tag.id.in_(list(tag_ids)))
            .order_by(Tag.id)
        )
        result = await self._exec(stmt)
        return list(result.all())

    async def list(self, query: TagListQuery) -> Tuple[int, List[Tag]]:
        conditions = [Tag.hub_id == query.hub_id]
        if query.search:
            conditions.append(Tag.name.ilike(like_pattern(query.search), escape="\\"))
        return await self._page(Tag, conditions, query)

    async def create(self, tag: Tag) -> Tag:
        return await self._save(tag)

    async def update(self, tag: Tag) -> Tag:
        return await self._save(tag)

    async def delete(self, tag: Tag) -> None:
        await self._execute(delete(ProductTag).where(ProductTag.tag_id == tag.id))
        await self._delete(tag)
