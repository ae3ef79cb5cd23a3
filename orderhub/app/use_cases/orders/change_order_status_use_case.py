"""
Change Order Status Use Case

Moves an order along draft -> pending -> processing -> completed, or to
cancelled from any non-terminal status.
"""

import logging
from typing import Union

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.entities import OrderStatus
from orderhub.libs.result import Result, Return

from .dtos import OrderResponse, build_order_response

logger = logging.getLogger(__name__)


class ChangeOrderStatusUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, order_id: int, status: Union[str, OrderStatus]
    ) -> Result[OrderResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        try:
            target = OrderStatus(status)
        except ValueError:
            return Return.err(validation_error(f"Unknown order status: {status}"))

        async with self.uow:
            order = await self.uow.orders.get_by_id(ctx.hub_id, order_id)
            if order is None:
                return Return.err(not_found("Order"))

            if not order.status.can_transition_to(target):
                return Return.err(
                    validation_error(
                        f"Order cannot move from {order.status.value} to {target.value}"
                    )
                )

            previous = order.status
            order.status = target
            order.updated_at = utcnow()
            order = await self.uow.orders.update(order)
            lines = await self.uow.orders.list_lines(order.id)
            await self.uow.commit()

            logger.info(
                "Order %s moved from %s to %s", order.id, previous.value, target.value
            )
            return Return.ok(build_order_response(order, lines))
