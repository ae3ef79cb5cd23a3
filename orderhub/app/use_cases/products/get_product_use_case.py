from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .catalog import product_views
from .dtos import ProductResponse


class GetProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, product_id: int) -> Result[ProductResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            product = await self.uow.products.get_by_id(ctx.hub_id, product_id)
            if product is None:
                return Return.err(not_found("Product"))
            views = await product_views(self.uow, [product])
            return Return.ok(views[0])
