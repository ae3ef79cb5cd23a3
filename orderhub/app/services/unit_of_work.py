from abc import ABC, abstractmethod

from orderhub.app.repositories.category_repository import ICategoryRepository
from orderhub.app.repositories.customer_repository import ICustomerRepository
from orderhub.app.repositories.discount_assignment_repository import (
    IDiscountAssignmentRepository,
)
from orderhub.app.repositories.order_repository import IOrderRepository
from orderhub.app.repositories.price_level_repository import IPriceLevelRepository
from orderhub.app.repositories.product_repository import IProductRepository
from orderhub.app.repositories.tag_repository import ITagRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    products: IProductRepository
    price_levels: IPriceLevelRepository
    categories: ICategoryRepository
    tags: ITagRepository
    customers: ICustomerRepository
    discounts: IDiscountAssignmentRepository
    orders: IOrderRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
