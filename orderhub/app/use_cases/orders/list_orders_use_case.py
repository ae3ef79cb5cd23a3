"""
List Orders Use Case

Paginated, filterable order listing for the caller's hub.
"""

from datetime import datetime
from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, validation_error
from orderhub.app.repositories.queries import OrderListQuery
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.listing import build_query
from orderhub.domain.entities import OrderStatus
from orderhub.libs.result import Result, Return

from .dtos import OrderListResponse, OrderResponse


class ListOrdersUseCase:
    """
    Business Rules:
    - Caller must be admin or orders_manager
    - search matches reference and notes, case-insensitively
    - status filter accepts any casing
    - Rows come back in id order
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self,
        ctx: CallerContext,
        search: Optional[str] = None,
        status: Optional[str] = None,
        customer_id: Optional[int] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Result[OrderListResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        status_filter = None
        if status:
            try:
                status_filter = OrderStatus(status)
            except ValueError:
                return Return.err(validation_error(f"Unknown order status: {status}"))

        query_result = build_query(
            OrderListQuery,
            hub_id=ctx.hub_id,
            search=search,
            status=status_filter,
            customer_id=customer_id,
            created_from=created_from,
            created_to=created_to,
            offset=offset,
            limit=limit,
        )
        if query_result.is_err():
            return query_result
        query = query_result.value

        async with self.uow:
            total, orders = await self.uow.orders.list(query)
            return Return.ok(
                OrderListResponse(
                    items=[OrderResponse.model_validate(order) for order in orders],
                    total=total,
                    offset=query.offset,
                    limit=query.limit,
                )
            )
