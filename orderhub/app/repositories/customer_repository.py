from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from orderhub.app.repositories.queries import CustomerListQuery
from orderhub.domain.entities import Customer


class ICustomerRepository(ABC):
    """Customer repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_email(self, hub_id: int, email: str) -> Optional[Customer]:
        pass

    @abstractmethod
    async def list(self, query: CustomerListQuery) -> Tuple[int, List[Customer]]:
        pass

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        """Delete a customer and its discount assignments; orders keep existing"""
        pass
