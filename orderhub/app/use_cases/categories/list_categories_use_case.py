"""
List Categories Use Case

Returns the hub's categories as a forest ordered by id at every level.
"""

from typing import Dict, List

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import Category
from orderhub.libs.result import Result, Return

from .dtos import CategoryNode


def build_tree(categories: List[Category]) -> List[CategoryNode]:
    nodes: Dict[int, CategoryNode] = {
        category.id: CategoryNode(
            id=category.id,
            parent_id=category.parent_id,
            name=category.name,
            description=category.description,
            is_archived=category.is_archived,
        )
        for category in sorted(categories, key=lambda c: c.id)
    }

    roots = []
    for node in nodes.values():
        parent = nodes.get(node.parent_id) if node.parent_id is not None else None
        # Children of a filtered-out (archived) parent surface as roots
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)
    return roots


class ListCategoriesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, include_archived: bool = False
    ) -> Result[List[CategoryNode]]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            categories = await self.uow.categories.list_all(
                ctx.hub_id, include_archived=include_archived
            )
            return Return.ok(build_tree(categories))
