from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from orderhub.app.repositories.queries import OrderListQuery
from orderhub.domain.entities import Order, OrderProduct


class IOrderRepository(ABC):
    """Order repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, order_id: int) -> Optional[Order]:
        pass

    @abstractmethod
    async def get_by_reference(self, hub_id: int, reference: str) -> Optional[Order]:
        pass

    @abstractmethod
    async def list(self, query: OrderListQuery) -> Tuple[int, List[Order]]:
        pass

    @abstractmethod
    async def create(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        """Delete an order together with its lines"""
        pass

    @abstractmethod
    async def list_lines(self, order_id: int) -> List[OrderProduct]:
        """Lines of an order ordered by id"""
        pass

    @abstractmethod
    async def get_line(self, order_id: int, line_id: int) -> Optional[OrderProduct]:
        pass

    @abstractmethod
    async def add_line(self, line: OrderProduct) -> OrderProduct:
        """Insert a line snapshot; lines are never updated in place"""
        pass

    @abstractmethod
    async def delete_line(self, line: OrderProduct) -> None:
        pass

    @abstractmethod
    async def sum_line_totals(self, order_id: int) -> int:
        """Sum of price_cents * quantity over the order's stored lines"""
        pass
