"""
Update Order Use Case

Edits order header fields. Existing lines are never re-priced, even when
the customer changes.
"""

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.validation import sanitize_optional_text
from orderhub.libs.result import Result, Return

from .dtos import OrderResponse, UpdateOrderCommand, build_order_response


class UpdateOrderUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, order_id: int, command: UpdateOrderCommand
    ) -> Result[OrderResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        fields = command.model_fields_set
        async with self.uow:
            order = await self.uow.orders.get_by_id(ctx.hub_id, order_id)
            if order is None:
                return Return.err(not_found("Order"))
            if order.status.is_terminal:
                return Return.err(
                    validation_error(f"A {order.status.value} order cannot be edited")
                )

            if "customer_id" in fields and command.customer_id is not None:
                customer = await self.uow.customers.get_by_id(ctx.hub_id, command.customer_id)
                if customer is None:
                    return Return.err(not_found("Customer"))

            if "reference" in fields:
                reference = sanitize_optional_text(command.reference)
                if reference is not None and reference != order.reference:
                    existing = await self.uow.orders.get_by_reference(ctx.hub_id, reference)
                    if existing is not None:
                        return Return.err(
                            conflict(f"Order reference {reference} already exists")
                        )
                order.reference = reference

            if "customer_id" in fields:
                order.customer_id = command.customer_id
            if "notes" in fields:
                order.notes = sanitize_optional_text(command.notes, multiline=True)

            order.updated_at = utcnow()
            order = await self.uow.orders.update(order)
            lines = await self.uow.orders.list_lines(order.id)
            await self.uow.commit()

            return Return.ok(build_order_response(order, lines))
