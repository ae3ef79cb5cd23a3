from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.price_resolver import PricingPolicy
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.orders import (
    AddOrderLineUseCase,
    ChangeOrderLineQuantityUseCase,
    ChangeOrderStatusUseCase,
    CreateOrderCommand,
    CreateOrderUseCase,
    DeleteOrderResponse,
    DeleteOrderUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    OrderLineCommand,
    OrderListResponse,
    OrderResponse,
    RemoveOrderLineUseCase,
    UpdateOrderCommand,
    UpdateOrderUseCase,
)
from orderhub.depends import (
    PageParams,
    get_caller_context,
    get_page_params,
    get_pricing_policy,
    get_unit_of_work,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


class ChangeStatusRequest(BaseModel):
    status: str = Field(..., description="Target status (draft/pending/processing/completed/cancelled)")


class ChangeQuantityRequest(BaseModel):
    quantity: int


@router.get("", status_code=status.HTTP_200_OK, response_model=OrderListResponse)
async def list_orders(
    search: Optional[str] = Query(None),
    order_status: Optional[str] = Query(None, alias="status"),
    customer_id: Optional[int] = Query(None),
    created_from: Optional[datetime] = Query(None),
    created_to: Optional[datetime] = Query(None),
    page: PageParams = Depends(get_page_params),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Orders

    Paginated listing of the caller's hub orders, ordered by id.
    search matches reference and notes.
    """
    result = await ListOrdersUseCase(uow).execute(
        ctx,
        search=search,
        status=order_status,
        customer_id=customer_id,
        created_from=created_from,
        created_to=created_to,
        offset=page.offset,
        limit=page.limit,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderResponse)
async def create_order(
    request: CreateOrderCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: PricingPolicy = Depends(get_pricing_policy),
):
    """
    Create Order

    Creates an order and snapshots its lines in one transaction.

    Raises:
        - 403 Forbidden: caller is neither admin nor orders_manager
        - 404 Not Found: customer, product or price level outside the hub
        - 409 Conflict: reference already used in the hub
        - 422 Unprocessable Entity: invalid line or PRICE_NOT_CONFIGURED
    """
    result = await CreateOrderUseCase(uow, policy).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{order_id}", status_code=status.HTTP_200_OK, response_model=OrderResponse)
async def get_order(
    order_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOrderUseCase(uow).execute(ctx, order_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{order_id}", status_code=status.HTTP_200_OK, response_model=OrderResponse)
async def update_order(
    order_id: int,
    request: UpdateOrderCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateOrderUseCase(uow).execute(ctx, order_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{order_id}", status_code=status.HTTP_200_OK, response_model=DeleteOrderResponse
)
async def delete_order(
    order_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteOrderUseCase(uow).execute(ctx, order_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{order_id}/status", status_code=status.HTTP_200_OK, response_model=OrderResponse
)
async def change_order_status(
    order_id: int,
    request: ChangeStatusRequest,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ChangeOrderStatusUseCase(uow).execute(ctx, order_id, request.status)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{order_id}/lines", status_code=status.HTTP_201_CREATED, response_model=OrderResponse
)
async def add_order_line(
    order_id: int,
    request: OrderLineCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: PricingPolicy = Depends(get_pricing_policy),
):
    result = await AddOrderLineUseCase(uow, policy).execute(ctx, order_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{order_id}/lines/{line_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrderResponse,
)
async def change_order_line_quantity(
    order_id: int,
    line_id: int,
    request: ChangeQuantityRequest,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ChangeOrderLineQuantityUseCase(uow).execute(
        ctx, order_id, line_id, request.quantity
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{order_id}/lines/{line_id}",
    status_code=status.HTTP_200_OK,
    response_model=OrderResponse,
)
async def remove_order_line(
    order_id: int,
    line_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RemoveOrderLineUseCase(uow).execute(ctx, order_id, line_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
