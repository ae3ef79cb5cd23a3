from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors
from orderhub.app.repositories.queries import CustomerListQuery
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.listing import build_query
from orderhub.libs.result import Result, Return

from .dtos import CustomerListResponse, CustomerResponse


class ListCustomersUseCase:
    """search matches name, email and phone"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self,
        ctx: CallerContext,
        search: Optional[str] = None,
        price_level_id: Optional[int] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Result[CustomerListResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        query_result = build_query(
            CustomerListQuery,
            hub_id=ctx.hub_id,
            search=search,
            price_level_id=price_level_id,
            offset=offset,
            limit=limit,
        )
        if query_result.is_err():
            return query_result
        query = query_result.value

        async with self.uow:
            total, customers = await self.uow.customers.list(query)
            return Return.ok(
                CustomerListResponse(
                    items=[CustomerResponse.model_validate(c) for c in customers],
                    total=total,
                    offset=query.offset,
                    limit=query.limit,
                )
            )
