"""
Customer Use Cases
"""

from .create_customer_use_case import CreateCustomerUseCase
from .delete_customer_use_case import DeleteCustomerUseCase
from .dtos import (
    CreateCustomerCommand,
    CustomerListResponse,
    CustomerResponse,
    DeleteCustomerResponse,
    UpdateCustomerCommand,
)
from .get_customer_use_case import GetCustomerUseCase
from .list_customers_use_case import ListCustomersUseCase
from .update_customer_use_case import UpdateCustomerUseCase

__all__ = [
    "CreateCustomerUseCase",
    "DeleteCustomerUseCase",
    "GetCustomerUseCase",
    "ListCustomersUseCase",
    "UpdateCustomerUseCase",
    "CreateCustomerCommand",
    "CustomerListResponse",
    "CustomerResponse",
    "DeleteCustomerResponse",
    "UpdateCustomerCommand",
]
