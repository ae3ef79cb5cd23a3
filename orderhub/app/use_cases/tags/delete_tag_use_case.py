from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return

from .dtos import DeleteTagResponse


class DeleteTagUseCase:
    """Delete a tag and detach it from every product"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(self, ctx: CallerContext, tag_id: int) -> Result[DeleteTagResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            tag = await self.uow.tags.get_by_id(ctx.hub_id, tag_id)
            if tag is None:
                return Return.err(not_found("Tag"))

            await self.uow.tags.delete(tag)
            await self.uow.commit()
            return Return.ok(DeleteTagResponse(status="deleted", tag_id=tag_id))
