from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.tags import (
    CreateTagUseCase,
    DeleteTagResponse,
    DeleteTagUseCase,
    ListTagsUseCase,
    RenameTagUseCase,
    TagCommand,
    TagListResponse,
    TagResponse,
)
from orderhub.depends import PageParams, get_caller_context, get_page_params, get_unit_of_work

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", status_code=status.HTTP_200_OK, response_model=TagListResponse)
async def list_tags(
    search: Optional[str] = Query(None),
    page: PageParams = Depends(get_page_params),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTagsUseCase(uow).execute(
        ctx, search=search, offset=page.offset, limit=page.limit
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TagResponse)
async def create_tag(
    request: TagCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateTagUseCase(uow).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{tag_id}", status_code=status.HTTP_200_OK, response_model=TagResponse)
async def rename_tag(
    tag_id: int,
    request: TagCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RenameTagUseCase(uow).execute(ctx, tag_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{tag_id}", status_code=status.HTTP_200_OK, response_model=DeleteTagResponse)
async def delete_tag(
    tag_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteTagUseCase(uow).execute(ctx, tag_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
