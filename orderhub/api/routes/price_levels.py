from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.price_levels import (
    CreatePriceLevelCommand,
    CreatePriceLevelUseCase,
    DeletePriceLevelResponse,
    DeletePriceLevelUseCase,
    ListPriceLevelsUseCase,
    PriceLevelListResponse,
    PriceLevelResponse,
    UpdatePriceLevelCommand,
    UpdatePriceLevelUseCase,
)
from orderhub.depends import PageParams, get_caller_context, get_page_params, get_unit_of_work

router = APIRouter(prefix="/price-levels", tags=["Price Levels"])


@router.get("", status_code=status.HTTP_200_OK, response_model=PriceLevelListResponse)
async def list_price_levels(
    search: Optional[str] = Query(None),
    page: PageParams = Depends(get_page_params),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListPriceLevelsUseCase(uow).execute(
        ctx, search=search, offset=page.offset, limit=page.limit
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PriceLevelResponse)
async def create_price_level(
    request: CreatePriceLevelCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreatePriceLevelUseCase(uow).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{price_level_id}", status_code=status.HTTP_200_OK, response_model=PriceLevelResponse
)
async def update_price_level(
    price_level_id: int,
    request: UpdatePriceLevelCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdatePriceLevelUseCase(uow).execute(ctx, price_level_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{price_level_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeletePriceLevelResponse,
)
async def delete_price_level(
    price_level_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeletePriceLevelUseCase(uow).execute(ctx, price_level_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
