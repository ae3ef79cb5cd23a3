from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import Category
from orderhub.domain.validation import sanitize_inline_text, sanitize_optional_text
from orderhub.libs.result import Result, Return

from .dtos import CategoryResponse, CreateCategoryCommand


class CreateCategoryUseCase:
    """Create a category; names are unique among siblings"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, command: CreateCategoryCommand
    ) -> Result[CategoryResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        name = sanitize_inline_text(command.name)
        if not name:
            return Return.err(validation_error("Category name is required"))

        async with self.uow:
            if command.parent_id is not None:
                parent = await self.uow.categories.get_by_id(ctx.hub_id, command.parent_id)
                if parent is None:
                    return Return.err(not_found("Parent category"))

            existing = await self.uow.categories.get_by_name(ctx.hub_id, command.parent_id, name)
            if existing is not None:
                return Return.err(conflict(f"Category {name} already exists here"))

            category = await self.uow.categories.create(
                Category(
                    hub_id=ctx.hub_id,
                    parent_id=command.parent_id,
                    name=name,
                    description=sanitize_optional_text(command.description, multiline=True),
                )
            )
            await self.uow.commit()
            return Return.ok(CategoryResponse.model_validate(category))
