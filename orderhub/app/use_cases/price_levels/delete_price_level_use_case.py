import logging

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import DeletePriceLevelResponse

logger = logging.getLogger(__name__)


class DeletePriceLevelUseCase:
    """
    Delete a price level.

    Its product prices and discount assignments go with it; customers billed
    at it are left without a price level. Existing order lines are untouched.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, price_level_id: int
    ) -> Result[DeletePriceLevelResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            level = await self.uow.price_levels.get_by_id(ctx.hub_id, price_level_id)
            if level is None:
                return Return.err(not_found("Price level"))

            await self.uow.price_levels.delete(level)
            await self.uow.commit()

            logger.info("Price level %s deleted from hub %s", price_level_id, ctx.hub_id)
            return Return.ok(
                DeletePriceLevelResponse(status="deleted", price_level_id=price_level_id)
            )
