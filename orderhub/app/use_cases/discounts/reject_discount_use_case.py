from orderhub.domain.entities import DiscountStatus

from .decide_discount import DecideDiscountUseCase


class RejectDiscountUseCase(DecideDiscountUseCase):
    """Reject a requested assignment; the customer's price level is unchanged"""

    outcome = DiscountStatus.rejected
