"""
Remove Order Line Use Case
"""

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found, validation_error
from orderhub.app.services.order_line_writer import OrderLineWriter
from orderhub.app.services.price_resolver import PriceResolver
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import OrderResponse, build_order_response


class RemoveOrderLineUseCase:
    """Delete one line of a draft or pending order and recompute the total"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, order_id: int, line_id: int
    ) -> Result[OrderResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            order = await self.uow.orders.get_by_id(ctx.hub_id, order_id)
            if order is None:
                return Return.err(not_found("Order"))
            if not order.status.accepts_line_changes:
                return Return.err(
                    validation_error(f"Lines of a {order.status.value} order cannot change")
                )

            line = await self.uow.orders.get_line(order.id, line_id)
            if line is None:
                return Return.err(not_found("Order line"))

            await self.uow.orders.delete_line(line)
            writer = OrderLineWriter(self.uow, PriceResolver(self.uow))
            order = await writer.refresh_total(order)
            lines = await self.uow.orders.list_lines(order.id)
            await self.uow.commit()

            return Return.ok(build_order_response(order, lines))
