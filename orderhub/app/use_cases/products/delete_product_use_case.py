import logging

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import DeleteProductResponse

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Delete a product; order lines keep their snapshot and lose the product link"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, product_id: int) -> Result[DeleteProductResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            product = await self.uow.products.get_by_id(ctx.hub_id, product_id)
            if product is None:
                return Return.err(not_found("Product"))

            await self.uow.products.delete(product)
            await self.uow.commit()

            logger.info("Product %s deleted from hub %s", product_id, ctx.hub_id)
            return Return.ok(DeleteProductResponse(status="deleted", product_id=product_id))
