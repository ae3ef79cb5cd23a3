from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from orderhub.api.error import raise_for_error
from orderhub.app.context import CallerContext
from orderhub.app.services.price_resolver import PricingPolicy, ResolvedPrice
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.app.use_cases.pricing import ResolvePriceUseCase
from orderhub.depends import get_caller_context, get_pricing_policy, get_unit_of_work

router = APIRouter(prefix="/pricing", tags=["Pricing"])


@router.get(
    "/products/{product_id}", status_code=status.HTTP_200_OK, response_model=ResolvedPrice
)
async def resolve_price(
    product_id: int,
    customer_id: Optional[int] = Query(None),
    price_level_id: Optional[int] = Query(None),
    ctx: CallerContext = Depends(get_caller_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: PricingPolicy = Depends(get_pricing_policy),
):
    """
    Resolve Price

    Price a product for a customer (through their approved price level) or at
    an explicit price level. Nothing is written.
    """
    result = await ResolvePriceUseCase(uow, policy).execute(
        ctx, product_id, customer_id=customer_id, price_level_id=price_level_id
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
