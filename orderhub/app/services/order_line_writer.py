"""
Order line snapshot writer.

Copies the current catalog state of a product (or the supplied ad-hoc
values) onto a new OrderProduct row and keeps Order.total_cents equal to
the sum of the stored lines. Runs inside the caller's unit of work.
"""

from typing import TYPE_CHECKING

from orderhub.app.errors import not_found, validation_error
from orderhub.app.services.price_resolver import PriceResolver
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.entities import Order, OrderProduct, Product
from orderhub.domain.validation import (
    normalize_currency,
    sanitize_inline_text,
    sanitize_optional_text,
    sanitize_sku,
)
from orderhub.libs.result import Result, Return

if TYPE_CHECKING:
    from orderhub.app.use_cases.orders.dtos import OrderLineCommand


class OrderLineWriter:
    def __init__(self, uow: UnitOfWork, resolver: PriceResolver):
        self.uow = uow
        self.resolver = resolver

    async def write_line(
        self, hub_id: int, order: Order, command: "OrderLineCommand"
    ) -> Result[OrderProduct]:
        """Snapshot one line onto `order`; does not touch the order total"""
        if command.quantity is None or command.quantity <= 0:
            return Return.err(validation_error("Quantity must be greater than zero"))

        if command.product_id is not None:
            line_result = await self._catalog_line(hub_id, order, command)
        else:
            line_result = self._ad_hoc_line(order, command)
        if line_result.is_err():
            return line_result

        line = line_result.value
        if line.currency != order.currency:
            return Return.err(
                validation_error(
                    f"Line currency {line.currency} does not match order currency {order.currency}"
                )
            )

        return Return.ok(await self.uow.orders.add_line(line))

    async def refresh_total(self, order: Order) -> Order:
        """Recompute total_cents from the stored lines and persist it"""
        order.total_cents = await self.uow.orders.sum_line_totals(order.id)
        order.updated_at = utcnow()
        return await self.uow.orders.update(order)

    async def _catalog_line(
        self, hub_id: int, order: Order, command: "OrderLineCommand"
    ) -> Result[OrderProduct]:
        if command.price_cents is not None:
            return Return.err(
                validation_error("Catalog lines are priced from their price level, not price_cents")
            )

        product = await self.uow.products.get_by_id(hub_id, command.product_id)
        if product is None:
            return Return.err(not_found("Product"))

        priced = await self.resolver.resolve_for_product(
            hub_id,
            product,
            customer_id=order.customer_id,
            price_level_id=command.price_level_id,
        )
        if priced.is_err():
            return Return.err(priced.error)

        price = priced.value
        return Return.ok(
            self._snapshot(order, product, price.price_cents, price.currency, command.quantity)
        )

    def _ad_hoc_line(self, order: Order, command: "OrderLineCommand") -> Result[OrderProduct]:
        name = sanitize_inline_text(command.name or "")
        if not name:
            return Return.err(validation_error("Ad-hoc lines need a name"))
        if command.price_cents is None or command.price_cents < 0:
            return Return.err(validation_error("Ad-hoc lines need a non-negative price"))
        try:
            currency = normalize_currency(command.currency or order.currency)
        except ValueError as exc:
            return Return.err(validation_error(str(exc)))

        return Return.ok(
            OrderProduct(
                order_id=order.id,
                product_id=None,
                name=name,
                sku=sanitize_sku(command.sku),
                description=sanitize_optional_text(command.description, multiline=True),
                price_cents=command.price_cents,
                currency=currency,
                quantity=command.quantity,
            )
        )

    @staticmethod
    def _snapshot(
        order: Order, product: Product, price_cents: int, currency: str, quantity: int
    ) -> OrderProduct:
        return OrderProduct(
            order_id=order.id,
            product_id=product.id,
            name=product.name,
            sku=product.sku,
            description=product.description,
            price_cents=price_cents,
            currency=currency,
            quantity=quantity,
        )

    @staticmethod
    def copy_with_quantity(line: OrderProduct, quantity: int) -> OrderProduct:
        """New row carrying the same snapshot as `line` with another quantity"""
        return OrderProduct(
            order_id=line.order_id,
            product_id=line.product_id,
            name=line.name,
            sku=line.sku,
            description=line.description,
            price_cents=line.price_cents,
            currency=line.currency,
            quantity=quantity,
        )

