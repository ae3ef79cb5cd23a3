from typing import List

from fastapi import APIRouter, Depends, Query, status

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.categories import (
    CategoryNode,
    CategoryResponse,
    CreateCategoryCommand,
    CreateCategoryUseCase,
    DeleteCategoryResponse,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryCommand,
    UpdateCategoryUseCase,
)
from orderhub.depends import get_caller_context, get_unit_of_work

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[CategoryNode])
async def list_categories(
    include_archived: bool = Query(False),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Category tree of the caller's hub"""
    result = await ListCategoriesUseCase(uow).execute(ctx, include_archived=include_archived)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CategoryResponse)
async def create_category(
    request: CreateCategoryCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateCategoryUseCase(uow).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{category_id}", status_code=status.HTTP_200_OK, response_model=CategoryResponse
)
async def update_category(
    category_id: int,
    request: UpdateCategoryCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateCategoryUseCase(uow).execute(ctx, category_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{category_id}", status_code=status.HTTP_200_OK, response_model=DeleteCategoryResponse
)
async def delete_category(
    category_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCategoryUseCase(uow).execute(ctx, category_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
