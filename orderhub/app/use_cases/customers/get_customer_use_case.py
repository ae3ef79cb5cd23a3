from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import CustomerResponse


class GetCustomerUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, customer_id: int) -> Result[CustomerResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            customer = await self.uow.customers.get_by_id(ctx.hub_id, customer_id)
            if customer is None:
                return Return.err(not_found("Customer"))
            return Return.ok(CustomerResponse.model_validate(customer))
