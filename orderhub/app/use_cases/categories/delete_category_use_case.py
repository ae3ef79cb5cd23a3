from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import DeleteCategoryResponse


class DeleteCategoryUseCase:
    """Delete a category; children become roots and products lose the category"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, category_id: int
    ) -> Result[DeleteCategoryResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            category = await self.uow.categories.get_by_id(ctx.hub_id, category_id)
            if category is None:
                return Return.err(not_found("Category"))

            await self.uow.categories.delete(category)
            await self.uow.commit()
            return Return.ok(DeleteCategoryResponse(status="deleted", category_id=category_id))
