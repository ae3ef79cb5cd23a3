from typing import List, Optional, Tuple

from sqlalchemy import delete, or_, update
from sqlmodel import select

from orderhub.adapter.repositories.base import SqlModelRepository, like_pattern
from orderhub.app.repositories.customer_repository import ICustomerRepository
from orderhub.app.repositories.queries import CustomerListQuery
from orderhub.domain.entities import Customer, DiscountAssignment, Order


class CustomerRepository(SqlModelRepository, ICustomerRepository):
    """Customer repository implementation using SQLModel"""

    async def get_by_id(self, hub_id: int, customer_id: int) -> Optional[Customer]:
        stmt = select(Customer).where(Customer.id == customer_id, Customer.hub_id == hub_id)
        result = await self._exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, hub_id: int, email: str) -> Optional[Customer]:
        stmt = select(Customer).where(
            Customer.hub_id == hub_id, Customer.email == email.strip().lower()
        )
        result = await self._exec(stmt)
        return result.one_or_none()

    async def list(self, query: CustomerListQuery) -> Tuple[int, List[Customer]]:
        conditions = [Customer.hub_id == query.hub_id]
        if query.price_level_id is not None:
            conditions.append(Customer.price_level_id == query.price_level_id)
        if query.search:
            pattern = like_pattern(query.search)
            conditions.append(
                or_(
                    Customer.name.ilike(pattern, escape="\\"),
                    Customer.email.ilike(pattern, escape="\\"),
                    Customer.phone.ilike(pattern, escape="\\"),
                )
            )
        return await self._page(Customer, conditions, query)

    async def create(self, customer: Customer) -> Customer:
        return await self._save(customer)

    async def update(self, customer: Customer) -> Customer:
        return await self._save(customer)

    async def delete(self, customer: Customer) -> None:
        await self._execute(
            delete(DiscountAssignment).where(DiscountAssignment.customer_id == customer.id)
        )
        await self._execute(
            update(Order).where(Order.customer_id == customer.id).values(customer_id=None)
        )
        await self._delete(customer)
