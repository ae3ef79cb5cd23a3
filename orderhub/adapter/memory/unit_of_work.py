from typing import Optional

from orderhub.adapter.memory.repositories import (
    InMemoryCategoryRepository,
    InMemoryCustomerRepository,
    InMemoryDiscountAssignmentRepository,
    InMemoryOrderRepository,
    InMemoryPriceLevelRepository,
    InMemoryProductRepository,
    InMemoryTagRepository,
)
from orderhub.adapter.memory.store import InMemoryStore
from orderhub.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """
    In-memory implementation of UnitOfWork.

    Entering takes a snapshot of the store; rollback restores it and commit
    moves it forward, so an uncommitted block leaves no trace.
    """

    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store or InMemoryStore()
        self._snapshot = self.store.snapshot()
        self.commits = 0

    async def __aenter__(self):
        self._snapshot = self.store.snapshot()
        self.products = InMemoryProductRepository(self.store)
        self.price_levels = InMemoryPriceLevelRepository(self.store)
        self.categories = InMemoryCategoryRepository(self.store)
        self.tags = InMemoryTagRepository(self.store)
        self.customers = InMemoryCustomerRepository(self.store)
        self.discounts = InMemoryDiscountAssignmentRepository(self.store)
        self.orders = InMemoryOrderRepository(self.store)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self._snapshot = self.store.snapshot()
        self.commits += 1

    async def rollback(self):
        self.store.restore(self._snapshot)
