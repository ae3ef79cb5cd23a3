from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.validation import sanitize_inline_text
from orderhub.libs.result import Result, Return

from .dtos import PriceLevelResponse, UpdatePriceLevelCommand


class UpdatePriceLevelUseCase:
    """Rename a price level"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, price_level_id: int, command: UpdatePriceLevelCommand
    ) -> Result[PriceLevelResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        name = sanitize_inline_text(command.name)
        if not name:
            return Return.err(validation_error("Price level name is required"))

        async with self.uow:
            level = await self.uow.price_levels.get_by_id(ctx.hub_id, price_level_id)
            if level is None:
                return Return.err(not_found("Price level"))

            existing = await self.uow.price_levels.get_by_name(ctx.hub_id, name)
            if existing is not None and existing.id != level.id:
                return Return.err(conflict(f"Price level {name} already exists"))

            level.name = name
            level.updated_at = utcnow()
            level = await self.uow.price_levels.update(level)
            await self.uow.commit()

            return Return.ok(PriceLevelResponse.model_validate(level))
