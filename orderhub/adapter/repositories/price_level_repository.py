from typing import List, Optional, Tuple

from sqlalchemy import delete, func, update
from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository, like_pattern
from orderhub.app.repositories.price_level_repository import IPriceLevelRepository
from orderhub.app.repositories.queries import PriceLevelListQuery
from orderhub.domain.entities import (
    Customer,
    DiscountAssignment,
    PriceLevel,
    ProductPriceLevel,
)


class PriceLevelRepository(SqlModelRepository, IPriceLevelRepository):
    """PriceLevel repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, price_level_id: int) -> Optional[PriceLevel]:
        stmt = select(PriceLevel).where(
            PriceLevel.id == price_level_id, PriceLevel.hub_id == hub_id
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, hub_id: int, name: str) -> Optional[PriceLevel]:
        stmt = select(PriceLevel).where(
            PriceLevel.hub_id == hub_id, func.lower(PriceLevel.name) == name.lower()
        )
        result = await self._exec(stmt)
        return result.first()

    async def list(self, query: PriceLevelListQuery) -> Tuple[int, List[PriceLevel]]:
        conditions = [PriceLevel.hub_id == query.hub_id]
        if query.search:
            conditions.append(PriceLevel.name.ilike(like_pattern(query.search), escape="\\"))
        return await self._page(PriceLevel, conditions, query)

    async def create(self, price_level: PriceLevel) -> PriceLevel:
        return await self._save(price_level)

    async def update(self, price_level: PriceLevel) -> PriceLevel:
        return await self._save(price_level)

    async def delete(self, price_level: PriceLevel) -> None:
        await self._execute(
            delete(ProductPriceLevel).where(ProductPriceLevel.price_level_id == price_level.id)
        )
        await self._execute(
            delete(DiscountAssignment).where(
                DiscountAssignment.price_level_id == price_level.id
            )
        )
        await self._execute(
            update(Customer)
            .where(Customer.price_level_id == price_level.id)
            .values(price_level_id=None)
        )
        await self._delete(price_level)
