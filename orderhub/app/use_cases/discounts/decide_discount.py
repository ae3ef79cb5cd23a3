"""Shared flow of approving and rejecting a discount assignment."""

import logging

from orderhub.app.context import APPROVAL_ROLES, CallerContext, require_role
from orderhub.app.errors import handles_storage_errors, not_found, validation_error
from orderhub.app.services.unit_of_work import UnitOfWork
from orderhub.domain.base import utcnow
from orderhub.domain.entities import DiscountAssignment, DiscountStatus
from orderhub.libs.result import Result, Return

from .dtos import DiscountAssignmentResponse

logger = logging.getLogger(__name__)


class DecideDiscountUseCase:
    """
    Moves a requested assignment to `outcome`.

    Only orders managers decide. Approved and rejected are final states.
    """

    outcome: DiscountStatus

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @handles_storage_errors
    async def execute(
        self, ctx: CallerContext, assignment_id: int
    ) -> Result[DiscountAssignmentResponse]:
        denied = require_role(ctx, APPROVAL_ROLES)
        if denied:
            return Return.err(denied)

        async with self.uow:
            assignment = await self.uow.discounts.get_by_id(ctx.hub_id, assignment_id)
            if assignment is None:
                return Return.err(not_found("Discount assignment"))

            if assignment.status.is_terminal:
                return Return.err(
                    validation_error(
                        f"Discount assignment is already {assignment.status.value}"
                    )
                )

            assignment.status = self.outcome
            assignment.decided_at = utcnow()
            assignment = await self.uow.discounts.update(assignment)
            await self.on_decided(ctx, assignment)
            await self.uow.commit()

            logger.info(
                "Discount %s %s for customer %s at price level %s",
                assignment.id,
                self.outcome.value,
                assignment.customer_id,
                assignment.price_level_id,
            )
            return Return.ok(DiscountAssignmentResponse.model_validate(assignment))

    async def on_decided(self, ctx: CallerContext, assignment: DiscountAssignment) -> None:
        pass
