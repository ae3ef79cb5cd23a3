from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.customers import (
    CreateCustomerCommand,
    CreateCustomerUseCase,
    CustomerListResponse,
    CustomerResponse,
    DeleteCustomerResponse,
    DeleteCustomerUseCase,
    GetCustomerUseCase,
    ListCustomersUseCase,
    UpdateCustomerCommand,
    UpdateCustomerUseCase,
)
from orderhub.depends import PageParams, get_caller_context, get_page_params, get_unit_of_work

router = APIRouter(prefix="/customers", tags=["Customers"])


class CreateCustomerRequest(BaseModel):
    """
    Create customer HTTP request payload

    Validates incoming request for adding a customer to the hub.
    """

    name: str = Field(..., description="Customer display name")
    email: EmailStr = Field(..., description="Contact email, unique within the hub")
    phone: Optional[str] = Field(None, description="Contact phone")


class UpdateCustomerRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    price_level_id: Optional[int] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=CustomerListResponse)
async def list_customers(
    search: Optional[str] = Query(None),
    price_level_id: Optional[int] = Query(None),
    page: PageParams = Depends(get_page_params),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCustomersUseCase(uow).execute(
        ctx,
        search=search,
        price_level_id=price_level_id,
        offset=page.offset,
        limit=page.limit,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CustomerResponse)
async def create_customer(
    request: CreateCustomerRequest,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = CreateCustomerCommand(
        name=request.name, email=str(request.email), phone=request.phone
    )
    result = await CreateCustomerUseCase(uow).execute(ctx, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{customer_id}", status_code=status.HTTP_200_OK, response_model=CustomerResponse)
async def get_customer(
    customer_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetCustomerUseCase(uow).execute(ctx, customer_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{customer_id}", status_code=status.HTTP_200_OK, response_model=CustomerResponse
)
async def update_customer(
    customer_id: int,
    request: UpdateCustomerRequest,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Customer

    Partial update. price_level_id may only name a level the customer holds
    an approved discount assignment for, or be null to clear it.
    """
    values = request.model_dump(exclude_unset=True)
    if values.get("email") is not None:
        values["email"] = str(values["email"])
    result = await UpdateCustomerUseCase(uow).execute(
        ctx, customer_id, UpdateCustomerCommand(**values)
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{customer_id}", status_code=status.HTTP_200_OK, response_model=DeleteCustomerResponse
)
async def delete_customer(
    customer_id: int,
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteCustomerUseCase(uow).execute(ctx, customer_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
