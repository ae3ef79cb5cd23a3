"""
Delete Order Use Case
"""

import logging

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import DeleteOrderResponse

logger = logging.getLogger(__name__)


class DeleteOrderUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, order_id: int) -> Result[DeleteOrderResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            order = await self.uow.orders.get_by_id(ctx.hub_id, order_id)
            if order is None:
                return Return.err(not_found("Order"))

            await self.uow.orders.delete(order)
            await self.uow.commit()

            logger.info("Order %s deleted from hub %s", order_id, ctx.hub_id)
            return Return.ok(DeleteOrderResponse(status="deleted", order_id=order_id))
