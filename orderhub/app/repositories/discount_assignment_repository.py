from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from orderhub.app.repositories.queries import DiscountAssignmentListQuery
from orderhub.domain.entities import DiscountAssignment


class IDiscountAssignmentRepository(ABC):
    """DiscountAssignment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, hub_id: int, assignment_id: int) -> Optional[DiscountAssignment]:
        pass

    @abstractmethod
    async def get_by_customer_and_level(
        self, customer_id: int, price_level_id: int
    ) -> Optional[DiscountAssignment]:
        pass

    @abstractmethod
    async def list(
        self, query: DiscountAssignmentListQuery
    ) -> Tuple[int, List[DiscountAssignment]]:
        pass

    @abstractmethod
    async def list_approved_for_customer(self, customer_id: int) -> List[DiscountAssignment]:
        """Approved assignments of one customer ordered by id"""
        pass

    @abstractmethod
    async def create(self, assignment: DiscountAssignment) -> DiscountAssignment:
        pass

    @abstractmethod
    async def update(self, assignment: DiscountAssignment) -> DiscountAssignment:
        pass
