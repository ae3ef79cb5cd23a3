from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, validation_error
from orderhub.app.repositories.queries import DiscountAssignmentListQuery
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.listing import build_query
from orderhub.domain.entities import DiscountStatus
from orderhub.libs.result import Result, Return

from .dtos import DiscountAssignmentListResponse, DiscountAssignmentResponse


class ListDiscountAssignmentsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self,
        ctx: CallerContext,
        status: Optional[str] = None,
        customer_id: Optional[int] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Result[DiscountAssignmentListResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        status_filter = None
        if status:
            try:
                status_filter = DiscountStatus(status)
            except ValueError:
                return Return.err(validation_error(f"Unknown discount status: {status}"))

        query_result = build_query(
            DiscountAssignmentListQuery,
            hub_id=ctx.hub_id,
            status=status_filter,
            customer_id=customer_id,
            offset=offset,
            limit=limit,
        )
        if query_result.is_err():
            return query_result
        query = query_result.value

        async with self.uow:
            total, assignments = await self.uow.discounts.list(query)
            return Return.ok(
                DiscountAssignmentListResponse(
                    items=[DiscountAssignmentResponse.model_validate(a) for a in assignments],
                    total=total,
                    offset=query.offset,
                    limit=query.limit,
                )
            )
