"""
Update Category Use Case

Rename, re-parent, describe or archive a category. A category can never be
moved under itself or one of its descendants.
"""

from typing import Dict, Optional

from orderhub.app.context import CATALOG_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.validation import sanitize_inline_text, sanitize_optional_text
from orderhub.libs.result import Result, Return

from .dtos import CategoryResponse, UpdateCategoryCommand


def creates_cycle(parents: Dict[int, Optional[int]], category_id: int, new_parent_id: int) -> bool:
    """True when `new_parent_id` is `category_id` or lies below it"""
    seen = set()
    current = new_parent_id
    while current is not None and current not in seen:
        if current == category_id:
            return True
        seen.add(current)
        current = parents.get(current)
    return False


class UpdateCategoryUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, category_id: int, command: UpdateCategoryCommand
    ) -> Result[CategoryResponse]:
        denied = require_role(ctx, CATALOG_ROLES)
        if denied:
            return Return.err(denied)

        fields = command.model_fields_set
        async with self.uow:
            category = await self.uow.categories.get_by_id(ctx.hub_id, category_id)
            if category is None:
                return Return.err(not_found("Category"))

            parent_id = category.parent_id
            if "parent_id" in fields and command.parent_id != category.parent_id:
                parent_id = command.parent_id
                if parent_id is not None:
                    parent = await self.uow.categories.get_by_id(ctx.hub_id, parent_id)
                    if parent is None:
                        return Return.err(not_found("Parent category"))
                    tree = await self.uow.categories.list_all(ctx.hub_id)
                    parents = {node.id: node.parent_id for node in tree}
                    if creates_cycle(parents, category.id, parent_id):
                        return Return.err(
                            validation_error("A category cannot be moved under itself")
                        )

            name = category.name
            if "name" in fields:
                name = sanitize_inline_text(command.name or "")
                if not name:
                    return Return.err(validation_error("Category name is required"))

            if name != category.name or parent_id != category.parent_id:
                existing = await self.uow.categories.get_by_name(ctx.hub_id, parent_id, name)
                if existing is not None and existing.id != category.id:
                    return Return.err(conflict(f"Category {name} already exists here"))

            category.name = name
            category.parent_id = parent_id
            if "description" in fields:
                category.description = sanitize_optional_text(
                    command.description, multiline=True
                )
            if "is_archived" in fields and command.is_archived is not None:
                category.is_archived = command.is_archived

            category.updated_at = utcnow()
            category = await self.uow.categories.update(category)
            await self.uow.commit()
            return Return.ok(CategoryResponse.model_validate(category))
