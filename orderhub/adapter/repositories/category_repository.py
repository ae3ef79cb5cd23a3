from typing import List, Optional

from sqlalchemy import func, update
from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository
from orderhub.app.repositories.category_repository import ICategoryRepository
from orderhub.domain.entities import Category, Product


class CategoryRepository(SqlModelRepository, ICategoryRepository):
    """Category repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, category_id: int) -> Optional[Category]:
        stmt = select(Category).where(Category.id == category_id, Category.hub_id == hub_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_name(
        self, hub_id: int, parent_id: Optional[int], name: str
    ) -> Optional[Category]:
        stmt = select(Category).where(
            Category.hub_id == hub_id, func.lower(Category.name) == name.lower()
        )
        if parent_id is None:
            stmt = stmt.where(Category.parent_id.is_(None))
        else:
            stmt = stmt.where(Category.parent_id == parent_id)
        result = await self._exec(stmt)
        return result.first()

    async def list_all(self, hub_id: int, include_archived: bool = True) -> List[Category]:
        stmt = select(Category).where(Category.hub_id == hub_id)
        if not include_archived:
            stmt = stmt.where(Category.is_archived == False)  # noqa: E712
        result = await self._exec(stmt.order_by(Category.id))
        return list(result.all())

    async def create(self, category: Category) -> Category:
        return await self._save(category)

    async def update(self, category: Category) -> Category:
        return await self._save(category)

    async def delete(self, category: Category) -> None:
        await self._execute(
            update(Category)
            .where(Category.parent_id == category.id)
            .values(parent_id=None)
        )
        await self._execute(
            update(Product)
            .where(Product.category_id == category.id)
            .values(category_id=None)
        )
        await self._delete(category)
