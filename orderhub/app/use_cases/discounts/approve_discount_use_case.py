from orderhub.app.context import CallerContext
from orderhub.domain.base import utcnow
from orderhub.domain.entities import DiscountAssignment, DiscountStatus

from .decide_discount import DecideDiscountUseCase


class ApproveDiscountUseCase(DecideDiscountUseCase):
    """Approve a requested assignment and bill the customer at its price level"""

    outcome = DiscountStatus.approved

    async def on_decided(self, ctx: CallerContext, assignment: DiscountAssignment) -> None:
        customer = await self.uow.customers.get_by_id(ctx.hub_id, assignment.customer_id)
        if customer is None:
            return
        customer.price_level_id = assignment.price_level_id
        customer.updated_at = utcnow()
        await self.uow.customers.update(customer)
