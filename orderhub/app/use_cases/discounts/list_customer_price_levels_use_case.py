from typing import List

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.price_levels.dtos import PriceLevelResponse
from orderhub.libs.result import Result, Return


class ListCustomerPriceLevelsUseCase:
    """Price levels a customer may be billed at, i.e. those with an approved assignment"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, customer_id: int
    ) -> Result[List[PriceLevelResponse]]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            customer = await self.uow.customers.get_by_id(ctx.hub_id, customer_id)
            if customer is None:
                return Return.err(not_found("Customer"))

            levels = []
            for assignment in await self.uow.discounts.list_approved_for_customer(customer.id):
                level = await self.uow.price_levels.get_by_id(
                    ctx.hub_id, assignment.price_level_id
                )
                if level is not None:
                    levels.append(PriceLevelResponse.model_validate(level))
            return Return.ok(levels)
