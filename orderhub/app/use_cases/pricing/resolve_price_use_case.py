"""
Resolve Price Use Case

Answers "what would this product cost right now" without writing anything.
"""

from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors
from orderhub.app.services.price_resolver import PriceResolver, PricingPolicy, ResolvedPrice
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.libs.result import Result, Return


class ResolvePriceUseCase:
    def __init__(self, uow: UnitOfWork, policy: Optional[PricingPolicy] = None):
        self.uow = uow
        self.policy = policy or PricingPolicy()

    @handles_storage_errors
    async def execute(
        self,
        ctx: CallerContext,
        product_id: int,
        customer_id: Optional[int] = None,
        price_level_id: Optional[int] = None,
    ) -> Result[ResolvedPrice]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            resolver = PriceResolver(self.uow, self.policy)
            return await resolver.resolve(
                ctx.hub_id,
                product_id,
                customer_id=customer_id,
                price_level_id=price_level_id,
            )
