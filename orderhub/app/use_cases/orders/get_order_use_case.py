from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import OrderResponse, build_order_response


class GetOrderUseCase:
    """Load one order of the caller's hub with its lines"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, order_id: int) -> Result[OrderResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            order = await self.uow.orders.get_by_id(ctx.hub_id, order_id)
            if order is None:
                return Return.err(not_found("Order"))
            lines = await self.uow.orders.list_lines(order.id)
            return Return.ok(build_order_response(order, lines))
