"""
Hub Orders Domain Enums

All enumeration types used across domain entities.
Stored values are lowercase; lookups accept any casing because older rows
and external callers use capitalized names ("Pending").
"""

from enum import Enum


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class OrderStatus(_CaseInsensitiveEnum):
    """Order lifecycle status"""

    draft = "draft"
    pending = "pending"
    processing = "processing"
    completed = "completed"
    cancelled = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.completed, OrderStatus.cancelled)

    @property
    def accepts_line_changes(self) -> bool:
        return self in (OrderStatus.draft, OrderStatus.pending)

    def can_transition_to(self, target: "OrderStatus") -> bool:
        if self.is_terminal or target == self:
            return False
        if target == OrderStatus.cancelled:
            return True
        return ORDER_STATUS_SEQUENCE.index(target) == ORDER_STATUS_SEQUENCE.index(self) + 1


ORDER_STATUS_SEQUENCE = (
    OrderStatus.draft,
    OrderStatus.pending,
    OrderStatus.processing,
    OrderStatus.completed,
)


class DiscountStatus(_CaseInsensitiveEnum):
    """Discount assignment approval status"""

    requested = "requested"
    approved = "approved"
    rejected = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self != DiscountStatus.requested
