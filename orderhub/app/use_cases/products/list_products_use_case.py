"""
List Products Use Case
"""

from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors
from orderhub.app.repositories.queries import ProductListQuery
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.listing import build_query
from orderhub.domain.validation import sanitize_sku
from orderhub.libs.result import Result, Return

from .catalog import product_views
from .dtos import ProductListResponse


class ListProductsUseCase:
    """
    Business Rules:
    - search matches name, sku and description, case-insensitively
    - Archived products are hidden unless include_archived is set
    - sku filter is an exact match
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self,
        ctx: CallerContext,
        search: Optional[str] = None,
        include_archived: bool = False,
        category_id: Optional[int] = None,
        tag_id: Optional[int] = None,
        sku: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Result[ProductListResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        query_result = build_query(
            ProductListQuery,
            hub_id=ctx.hub_id,
            search=search,
            include_archived=include_archived,
            category_id=category_id,
            tag_id=tag_id,
            sku=sanitize_sku(sku),
            offset=offset,
            limit=limit,
        )
        if query_result.is_err():
            return query_result
        query = query_result.value

        async with self.uow:
            total, products = await self.uow.products.list(query)
            return Return.ok(
                ProductListResponse(
                    items=await product_views(self.uow, products),
                    total=total,
                    offset=query.offset,
                    limit=query.limit,
                )
            )
