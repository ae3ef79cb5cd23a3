"""
Add Order Line Use Case

Appends one snapshot line to an existing order.
"""

import logging
from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found, validation_error
from orderhub.app.services.order_line_writer import OrderLineWriter
from orderhub.app.services.price_resolver import PriceResolver, PricingPolicy
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import OrderLineCommand, OrderResponse, build_order_response

logger = logging.getLogger(__name__)


class AddOrderLineUseCase:
    """
    Use case for adding a line to an order.

    Business Rules:
    - Caller must be admin or orders_manager
    - Order must belong to the caller's hub and still accept line changes
      (draft or pending)
    - Price is resolved now and frozen on the line
    - total_cents is recomputed in the same transaction
    """

    def __init__(self, uow: UnitOfWork, policy: Optional[PricingPolicy] = None):
        self.uow = uow
        self.policy = policy or PricingPolicy()

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, order_id: int, command: OrderLineCommand
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

            writer = OrderLineWriter(self.uow, PriceResolver(self.uow, self.policy))
            line_result = await writer.write_line(ctx.hub_id, order, command)
            if line_result.is_err():
                return Return.err(line_result.error)

            order = await writer.refresh_total(order)
            lines = await self.uow.orders.list_lines(order.id)
            await self.uow.commit()

            logger.info(
                "Line %s added to order %s, total now %d",
                line_result.value.id,
                order.id,
                order.total_cents,
            )
            return Return.ok(build_order_response(order, lines))
