from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from orderhub.api.error import ClientError, raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.errors import validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.products import (
    CreateProductCommand,
    CreateProductUseCase,
    DeleteProductResponse,
    DeleteProductUseCase,
    GetProductUseCase,
    ImportProductsResponse,
    ImportProductsUseCase,
    ListProductsUseCase,
    ProductListResponse,
    ProductResponse,
    UpdateProductCommand,
    UpdateProductUseCase,
)
from orderhub.depends import PageParams, get_caller_context, get_page_params, get_unit_of_work

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ProductListResponse)
async def list_products(
    search: Optional[str] = Query(None),
    include_archived: bool = Query(False),
    category_id: Optional[int] = Query(None),
    tag_id: Optional[int] = Query(None),
    sku: Optional[str] = Query(None),
    page: PageParams = Depends(get_page_params),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListProductsUseCase(uow).execute(
        ctx,
        search=search,
        include_archived=include_archived,
        category_id=category_id,
        tag_id=tag_id,
        sku=sku,
        offset=page.offset,
        limit=page.limit,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
async def create_product(
    request: CreateProductCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateProductUseCase(uow).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/import", status_code=status.HTTP_201_CREATED, response_model=ImportProductsResponse
)
async def import_products(
    http_request: Request,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Import Products

    Bulk-creates products from CSV text. Columns: name (or title), currency,
    sku, description, plus one decimal price column per price level name.
    The whole upload is rejected if any row is invalid.
    """
    try:
        csv_text = (await http_request.body()).decode("utf-8")
    except UnicodeDecodeError:
        raise ClientError(
            validation_error("CSV upload must be UTF-8 text"),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    result = await ImportProductsUseCase(uow).execute(ctx, csv_text)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse)
async def get_product(
    product_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProductUseCase(uow).execute(ctx, product_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse)
async def update_product(
    product_id: int,
    request: UpdateProductCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateProductUseCase(uow).execute(ctx, product_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{product_id}", status_code=status.HTTP_200_OK, response_model=DeleteProductResponse
)
async def delete_product(
    product_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteProductUseCase(uow).execute(ctx, product_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
