import logging

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import PriceLevel
from orderhub.domain.validation import sanitize_inline_text
from orderhub.libs.result import Result, Return

from .dtos import CreatePriceLevelCommand, PriceLevelResponse

logger = logging.getLogger(__name__)


class CreatePriceLevelUseCase:
    """Create a price level; names are unique per hub regardless of case"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, command: CreatePriceLevelCommand
    ) -> Result[PriceLevelResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        name = sanitize_inline_text(command.name)
        if not name:
            return Return.err(validation_error("Price level name is required"))

        async with self.uow:
            if await self.uow.price_levels.get_by_name(ctx.hub_id, name) is not None:
                return Return.err(conflict(f"Price level {name} already exists"))

            level = await self.uow.price_levels.create(PriceLevel(hub_id=ctx.hub_id, name=name))
            await self.uow.commit()

            logger.info("Price level %s (%s) created in hub %s", level.id, name, ctx.hub_id)
            return Return.ok(PriceLevelResponse.model_validate(level))
