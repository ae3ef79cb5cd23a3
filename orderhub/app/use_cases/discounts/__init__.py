"""
Discount Use Cases

Request, approve and reject discount assignments.
"""

from .approve_discount_use_case import ApproveDiscountUseCase
from .dtos import (
    DiscountAssignmentListResponse,
    DiscountAssignmentResponse,
    RequestDiscountCommand,
)
from .list_customer_price_levels_use_case import ListCustomerPriceLevelsUseCase
from .list_discount_assignments_use_case import ListDiscountAssignmentsUseCase
from .reject_discount_use_case import RejectDiscountUseCase
from .request_discount_use_case import RequestDiscountUseCase

__all__ = [
    "ApproveDiscountUseCase",
    "ListCustomerPriceLevelsUseCase",
    "ListDiscountAssignmentsUseCase",
    "RejectDiscountUseCase",
    "RequestDiscountUseCase",
    "DiscountAssignmentListResponse",
    "DiscountAssignmentResponse",
    "RequestDiscountCommand",
]
