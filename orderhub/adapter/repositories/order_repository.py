from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_
from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository, like_pattern
from orderhub.app.repositories.order_repository import IOrderRepository
from orderhub.app.repositories.queries import OrderListQuery
from orderhub.domain.entities import Order, OrderProduct


class OrderRepository(SqlModelRepository, IOrderRepository):
    """Order repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, order_id: int) -> Optional[Order]:
        stmt = select(Order).where(Order.id == order_id, Order.hub_id == hub_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_reference(self, hub_id: int, reference: str) -> Optional[Order]:
        stmt = select(Order).where(Order.hub_id == hub_id, Order.reference == reference)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def list(self, query: OrderListQuery) -> Tuple[int, List[Order]]:
        conditions = [Order.hub_id == query.hub_id]
        if query.status is not None:
            conditions.append(Order.status == query.status)
        if query.customer_id is not None:
            conditions.append(Order.customer_id == query.customer_id)
        if query.created_from is not None:
            conditions.append(Order.created_at >= query.created_from)
        if query.created_to is not None:
            conditions.append(Order.created_at <= query.created_to)
        if query.search:
            pattern = like_pattern(query.search)
            conditions.append(
                or_(
                    Order.reference.ilike(pattern, escape="\\"),
                    Order.notes.ilike(pattern, escape="\\"),
                )
            )
        return await self._page(Order, conditions, query)

    async def create(self, order: Order) -> Order:
        return await self._save(order)

    async def update(self, order: Order) -> Order:
        return await self._save(order)

    async def delete(self, order: Order) -> None:
        await self._execute(delete(OrderProduct).where(OrderProduct.order_id == order.id))
        await self._delete(order)

    async def list_lines(self, order_id: int) -> List[OrderProduct]:
        stmt = (
            select(OrderProduct)
            .where(OrderProduct.order_id == order_id)
            .order_by(OrderProduct.id)
        )
        result = await self._exec(stmt)
        return list(result.all())

    async def get_line(self, order_id: int, line_id: int) -> Optional[OrderProduct]:
        stmt = select(OrderProduct).where(
            OrderProduct.id == line_id, OrderProduct.order_id == order_id
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def add_line(self, line: OrderProduct) -> OrderProduct:
        return await self._save(line)

    async def delete_line(self, line: OrderProduct) -> None:
        await self._delete(line)

    async def sum_line_totals(self, order_id: int) -> int:
        stmt = select(
            func.coalesce(func.sum(OrderProduct.price_cents * OrderProduct.quantity), 0)
        ).where(OrderProduct.order_id == order_id)
        result = await self._exec(stmt)
        return int(result.one())
