from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import DeleteCustomerResponse


class DeleteCustomerUseCase:
    """Delete a customer with its discount assignments; its orders stay, unlinked"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, customer_id: int
    ) -> Result[DeleteCustomerResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            customer = await self.uow.customers.get_by_id(ctx.hub_id, customer_id)
            if customer is None:
                return Return.err(not_found("Customer"))

            await self.uow.customers.delete(customer)
            await self.uow.commit()
            return Return.ok(DeleteCustomerResponse(status="deleted", customer_id=customer_id))
