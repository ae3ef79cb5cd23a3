"""
Price resolution for new order lines.

Given a product and either a customer or an explicit price level, find the
price to snapshot. Reads only; callers run it inside their own unit of work
so the resolved price and the written line come from one transaction.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from orderhub.app.errors import ErrorCode, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import DiscountStatus, Product
from orderhub.libs.result import Error, Result, Return


@dataclass(frozen=True)
class PricingPolicy:
    """
    Hub-wide pricing options, built once from configuration.

    fallback_price_level_name: price level used when the product has no
    price at the resolved level. None disables the fallback.
    default_currency: currency of orders created without lines or an
    explicit currency.
    """

    fallback_price_level_name: Optional[str] = None
    default_currency: str = "USD"


class ResolvedPrice(BaseModel):
    product_id: int
    price_level_id: int
    price_cents: int
    currency: str
    used_fallback: bool = False


class PriceResolver:
    def __init__(self, uow: UnitOfWork, policy: Optional[PricingPolicy] = None):
        self.uow = uow
        self.policy = policy or PricingPolicy()

    async def resolve(
        self,
        hub_id: int,
        product_id: int,
        customer_id: Optional[int] = None,
        price_level_id: Optional[int] = None,
    ) -> Result[ResolvedPrice]:
        product = await self.uow.products.get_by_id(hub_id, product_id)
        if product is None:
            return Return.err(not_found("Product"))
        return await self.resolve_for_product(hub_id, product, customer_id, price_level_id)

    async def resolve_for_product(
        self,
        hub_id: int,
        product: Product,
        customer_id: Optional[int] = None,
        price_level_id: Optional[int] = None,
    ) -> Result[ResolvedPrice]:
        """
        Resolve the price of an already loaded product.

        An explicit price_level_id wins over the customer's level. When a
        customer is involved that level still needs an approved assignment.
        """
        if product.is_archived:
            return Return.err(validation_error("Archived products cannot be ordered"))

        if price_level_id is not None:
            level = await self.uow.price_levels.get_by_id(hub_id, price_level_id)
            if level is None:
                return Return.err(not_found("Price level"))
            level_id = level.id
            if customer_id is not None:
                customer = await self.uow.customers.get_by_id(hub_id, customer_id)
                if customer is None:
                    return Return.err(not_found("Customer"))
                if not await self._is_approved(customer.id, level.id):
                    return Return.err(
                        Error(
                            ErrorCode.NOT_FOUND,
                            f"Customer has no approved assignment for price level {level.id}",
                        )
                    )
        elif customer_id is not None:
            level_result = await self._customer_level(hub_id, customer_id)
            if level_result.is_err():
                return level_result
            level_id = level_result.value
        else:
            return Return.err(
                validation_error("A customer or a price level is required to price a product")
            )

        rate = await self.uow.products.get_price(product.id, level_id)
        if rate is not None:
            return Return.ok(self._resolved(product, level_id, rate.price_cents, False))

        fallback = await self._fallback_price(hub_id, product, level_id)
        if fallback is not None:
            return Return.ok(fallback)

        return Return.err(
            Error(
                ErrorCode.PRICE_NOT_CONFIGURED,
                f"Product {product.id} has no price for price level {level_id}",
            )
        )

    async def _customer_level(self, hub_id: int, customer_id: int) -> Result[int]:
        customer = await self.uow.customers.get_by_id(hub_id, customer_id)
        if customer is None:
            return Return.err(not_found("Customer"))
        if customer.price_level_id is None:
            return Return.err(
                Error(ErrorCode.NOT_FOUND, "Customer has no approved price level")
            )

        if not await self._is_approved(customer.id, customer.price_level_id):
            return Return.err(
                Error(ErrorCode.NOT_FOUND, "Customer has no approved price level")
            )
        return Return.ok(customer.price_level_id)

    async def _is_approved(self, customer_id: int, price_level_id: int) -> bool:
        assignment = await self.uow.discounts.get_by_customer_and_level(
            customer_id, price_level_id
        )
        return assignment is not None and assignment.status == DiscountStatus.approved

    async def _fallback_price(
        self, hub_id: int, product: Product, tried_level_id: int
    ) -> Optional[ResolvedPrice]:
        if not self.policy.fallback_price_level_name:
            return None
        level = await self.uow.price_levels.get_by_name(
            hub_id, self.policy.fallback_price_level_name
        )
        if level is None or level.id == tried_level_id:
            return None
        rate = await self.uow.products.get_price(product.id, level.id)
        if rate is None:
            return None
        return self._resolved(product, level.id, rate.price_cents, True)

    @staticmethod
    def _resolved(product: Product, level_id: int, price_cents: int, fallback: bool):
        return ResolvedPrice(
            product_id=product.id,
            price_level_id=level_id,
            price_cents=price_cents,
            currency=product.currency,
            used_fallback=fallback,
        )
