from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.discounts import (
    ApproveDiscountUseCase,
    DiscountAssignmentListResponse,
    DiscountAssignmentResponse,
    ListCustomerPriceLevelsUseCase,
    ListDiscountAssignmentsUseCase,
    RejectDiscountUseCase,
    RequestDiscountCommand,
    RequestDiscountUseCase,
)
from orderhub.app.use_cases.price_levels import PriceLevelResponse
from orderhub.depends import PageParams, get_caller_context, get_page_params, get_unit_of_work

router = APIRouter(prefix="/discounts", tags=["Discounts"])


@router.get("", status_code=status.HTTP_200_OK, response_model=DiscountAssignmentListResponse)
async def list_discount_assignments(
    assignment_status: Optional[str] = Query(None, alias="status"),
    customer_id: Optional[int] = Query(None),
    page: PageParams = Depends(get_page_params),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListDiscountAssignmentsUseCase(uow).execute(
        ctx,
        status=assignment_status,
        customer_id=customer_id,
        offset=page.offset,
        limit=page.limit,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DiscountAssignmentResponse)
async def request_discount(
    request: RequestDiscountCommand,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request Discount

    Asks for a customer to be billed at a price level. An orders manager
    approves or rejects the request.

    Raises:
        - 404 Not Found: customer or price level outside the hub
        - 409 Conflict: an assignment already exists for the pair
    """
    result = await RequestDiscountUseCase(uow).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{assignment_id}/approve",
    status_code=status.HTTP_200_OK,
    response_model=DiscountAssignmentResponse,
)
async def approve_discount(
    assignment_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ApproveDiscountUseCase(uow).execute(ctx, assignment_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{assignment_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=DiscountAssignmentResponse,
)
async def reject_discount(
    assignment_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RejectDiscountUseCase(uow).execute(ctx, assignment_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/customers/{customer_id}/price-levels",
    status_code=status.HTTP_200_OK,
    response_model=List[PriceLevelResponse],
)
async def list_customer_price_levels(
    customer_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCustomerPriceLevelsUseCase(uow).execute(ctx, customer_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
