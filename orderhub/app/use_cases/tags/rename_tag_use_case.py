from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.validation import sanitize_inline_text
from orderhub.libs.result import Result, Return

from .dtos import TagCommand, TagResponse


class RenameTagUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, tag_id: int, command: TagCommand
    ) -> Result[TagResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        name = sanitize_inline_text(command.name)
        if not name:
            return Return.err(validation_error("Tag name is required"))

        async with self.uow:
            tag = await self.uow.tags.get_by_id(ctx.hub_id, tag_id)
            if tag is None:
                return Return.err(not_found("Tag"))

            existing = await self.uow.tags.get_by_name(ctx.hub_id, name)
            if existing is not None and existing.id != tag.id:
                return Return.err(conflict(f"Tag {name} already exists"))

            tag.name = name
            tag.updated_at = utcnow()
            tag = await self.uow.tags.update(tag)
            await self.uow.commit()
            return Return.ok(TagResponse.model_validate(tag))
