"""
Order Use Cases

Order creation, line snapshots, status changes and listing.
"""

from .add_order_line_use_case import AddOrderLineUseCase
from .change_order_line_quantity_use_case import ChangeOrderLineQuantityUseCase
from .change_order_status_use_case import ChangeOrderStatusUseCase
from .create_order_use_case import CreateOrderUseCase
from .delete_order_use_case import DeleteOrderUseCase
from .dtos import (
    CreateOrderCommand,
    DeleteOrderResponse,
    OrderLineCommand,
    OrderLineResponse,
    OrderListResponse,
    OrderResponse,
    UpdateOrderCommand,
)
from .get_order_use_case import GetOrderUseCase
from .list_orders_use_case import ListOrdersUseCase
from .remove_order_line_use_case import RemoveOrderLineUseCase
from .update_order_use_case import UpdateOrderUseCase

__all__ = [
    "AddOrderLineUseCase",
    "ChangeOrderLineQuantityUseCase",
    "ChangeOrderStatusUseCase",
    "CreateOrderUseCase",
    "DeleteOrderUseCase",
    "GetOrderUseCase",
    "ListOrdersUseCase",
    "RemoveOrderLineUseCase",
    "UpdateOrderUseCase",
    "CreateOrderCommand",
    "DeleteOrderResponse",
    "OrderLineCommand",
    "OrderLineResponse",
    "OrderListResponse",
    "OrderResponse",
    "UpdateOrderCommand",
]
