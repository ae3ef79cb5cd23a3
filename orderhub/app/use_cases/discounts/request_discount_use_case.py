"""
Request Discount Use Case

Opens a discount assignment that an orders manager later approves or rejects.
"""

import logging

from orderhub.app.context import ORDER_ROLES, CallerContext, require_role
from orderhub.app.errors import conflict, handles_storage_errors, not_found
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.entities import DiscountAssignment, DiscountStatus
from orderhub.domain.validation import sanitize_optional_text
from orderhub.libs.result import Result, Return

from .dtos import DiscountAssignmentResponse, RequestDiscountCommand

logger = logging.getLogger(__name__)


class RequestDiscountUseCase:
    """
    Business Rules:
    - Caller must be admin or orders_manager
    - Customer and price level must belong to the caller's hub
    - One assignment per (customer, price level); a second request is a CONFLICT
      whatever the state of the first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, command: RequestDiscountCommand
    ) -> Result[DiscountAssignmentResponse]:
        denied = require_role(ctx, ORDER_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            customer = await self.uow.customers.get_by_id(ctx.hub_id, command.customer_id)
            if customer is None:
                return Return.err(not_found("Customer"))

            level = await self.uow.price_levels.get_by_id(ctx.hub_id, command.price_level_id)
            if level is None:
                return Return.err(not_found("Price level"))

            existing = await self.uow.discounts.get_by_customer_and_level(customer.id, level.id)
            if existing is not None:
                return Return.err(
                    conflict(
                        f"Customer {customer.id} already has a {existing.status.value} "
                        f"assignment for price level {level.id}"
                    )
                )

            assignment = await self.uow.discounts.create(
                DiscountAssignment(
                    hub_id=ctx.hub_id,
                    customer_id=customer.id,
                    price_level_id=level.id,
                    status=DiscountStatus.requested,
                    notes=sanitize_optional_text(command.notes, multiline=True),
                )
            )
            await self.uow.commit()

            logger.info(
                "Discount %s requested for customer %s at price level %s",
                assignment.id,
                customer.id,
                level.id,
            )
            return Return.ok(DiscountAssignmentResponse.model_validate(assignment))
