from typing import List, Optional, Tuple

from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository
from orderhub.app.repositories.discount_assignment_repository import (
    IDiscountAssignmentRepository,
)
from orderhub.app.repositories.queries import DiscountAssignmentListQuery
from orderhub.domain.entities import DiscountAssignment, DiscountStatus


class DiscountAssignmentRepository(SqlModelRepository, IDiscountAssignmentRepository):
    """DiscountAssignment repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, assignment_id: int) -> Optional[DiscountAssignment]:
        stmt = select(DiscountAssignment).where(
            DiscountAssignment.id == assignment_id, DiscountAssignment.hub_id == hub_id
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_customer_and_level(
        self, customer_id: int, price_level_id: int
    ) -> Optional[DiscountAssignment]:
        stmt = select(DiscountAssignment).where(
            DiscountAssignment.customer_id == customer_id,
            DiscountAssignment.price_level_id == price_level_id,
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def list(
        self, query: DiscountAssignmentListQuery
    ) -> Tuple[int, List[DiscountAssignment]]:
        conditions = [DiscountAssignment.hub_id == query.hub_id]
        if query.status is not None:
            conditions.append(DiscountAssignment.status == query.status)
        if query.customer_id is not None:
            conditions.append(DiscountAssignment.customer_id == query.customer_id)
        return await self._page(DiscountAssignment, conditions, query)

    async def list_approved_for_customer(self, customer_id: int) -> List[DiscountAssignment]:
        stmt = (
            select(DiscountAssignment)
            .where(
                DiscountAssignment.customer_id == customer_id,
                DiscountAssignment.status == DiscountStatus.approved,
            )
            .order_by(DiscountAssignment.id)
        )
        result = await self._exec(stmt)
        return list(result.all())

    async def create(self, assignment: DiscountAssignment) -> DiscountAssignment:
        return await self._save(assignment)

    async def update(self, assignment: DiscountAssignment) -> DiscountAssignment:
        return await self._save(assignment)
