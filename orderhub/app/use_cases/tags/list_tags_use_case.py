from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors
from orderhub.app.repositories.queries import TagListQuery
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.listing import build_query
from orderhub.libs.result import Result, Return

from .dtos import TagListResponse, TagResponse


class ListTagsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self,
        ctx: CallerContext,
        search: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Result[TagListResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        query_result = build_query(
            TagListQuery, hub_id=ctx.hub_id, search=search, offset=offset, limit=limit
        )
        if query_result.is_err():
            return query_result
        query = query_result.value

        async with self.uow:
            total, tags = await self.uow.tags.list(query)
            return Return.ok(
                TagListResponse(
                    items=[TagResponse.model_validate(tag) for tag in tags],
                    total=total,
                    offset=query.offset,
                    limit=query.limit,
                )
            )
