"""
Create Order Use Case

Creates an order and snapshots its lines in one transaction.
"""

import logging
from typing import Optional

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.order_line_writer import OrderLineWriter
from orderhub.app.services.price_resolver import PriceResolver, PricingPolicy
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import Order, OrderStatus
from orderhub.domain.validation import (
    normalize_currency,
    sanitize_inline_text,
    sanitize_optional_text,
)
from orderhub.libs.result import Result, Return

from .dtos import CreateOrderCommand, OrderResponse, build_order_response

logger = logging.getLogger(__name__)

INITIAL_STATUSES = (OrderStatus.draft, OrderStatus.pending)


class CreateOrderUseCase:
    """
    Use case for creating an order with its lines.

    Business Rules:
    - Caller must be admin or orders_manager
    - Customer (when given) must belong to the caller's hub
    - Reference is unique within the hub
    - New orders start as draft or pending
    - Order currency: explicit, else the first line's, else the policy default
    - Every line is a snapshot; total_cents is the sum of the lines
    - Any failing line aborts the whole order
    """

    def __init__(self, uow: UnitOfWork, policy: Optional[PricingPolicy] = None):
        self.uow = uow
        self.policy = policy or PricingPolicy()

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, command: CreateOrderCommand
    ) -> Result[OrderResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        if command.status not in INITIAL_STATUSES:
            return Return.err(validation_error("New orders must be draft or pending"))

        async with self.uow:
            if command.customer_id is not None:
                customer = await self.uow.customers.get_by_id(ctx.hub_id, command.customer_id)
                if customer is None:
                    return Return.err(not_found("Customer"))

            reference = sanitize_optional_text(command.reference)
            if reference is not None:
                existing = await self.uow.orders.get_by_reference(ctx.hub_id, reference)
                if existing is not None:
                    return Return.err(conflict(f"Order reference {reference} already exists"))

            currency_result = await self._order_currency(ctx.hub_id, command)
            if currency_result.is_err():
                return currency_result

            order = await self.uow.orders.create(
                Order(
                    hub_id=ctx.hub_id,
                    customer_id=command.customer_id,
                    reference=reference,
                    status=command.status,
                    notes=sanitize_optional_text(command.notes, multiline=True),
                    total_cents=0,
                    currency=currency_result.value,
                )
            )

            writer = OrderLineWriter(self.uow, PriceResolver(self.uow, self.policy))
            lines = []
            for line_command in command.lines:
                line_result = await writer.write_line(ctx.hub_id, order, line_command)
                if line_result.is_err():
                    return Return.err(line_result.error)
                lines.append(line_result.value)

            order = await writer.refresh_total(order)
            await self.uow.commit()

            logger.info(
                "Order %s created in hub %s with %d lines, total %d %s",
                order.id,
                ctx.hub_id,
                len(lines),
                order.total_cents,
                order.currency,
            )
            return Return.ok(build_order_response(order, lines))

    async def _order_currency(self, hub_id: int, command: CreateOrderCommand) -> Result[str]:
        candidate = command.currency
        if candidate is None and command.lines:
            first = command.lines[0]
            if first.product_id is not None:
                product = await self.uow.products.get_by_id(hub_id, first.product_id)
                if product is None:
                    return Return.err(not_found("Product"))
                candidate = product.currency
            else:
                candidate = first.currency
        if candidate is None:
            candidate = self.policy.default_currency

        try:
            return Return.ok(normalize_currency(sanitize_inline_text(candidate)))
        except ValueError as exc:
            return Return.err(validation_error(str(exc)))
