import pytest
from unittest.mock import AsyncMock, MagicMock

from orderhub.adapter.memory.store import InMemoryStore
from orderhub.adapter.memory.unit_of_work import InMemoryUnitOfWork
from orderhub.app.context import ADMIN_ROLE, ORDERS_MANAGER_ROLE, CallerContext
from tests.fixtures.catalog import CatalogSeeder

HUB_ID = 1
OTHER_HUB_ID = 2


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def uow(store):
    """In-memory unit of work sharing `store` with the seeder"""
    return InMemoryUnitOfWork(store)


@pytest.fixture
def seed(store):
    return CatalogSeeder(store, HUB_ID)


@pytest.fixture
def other_seed(store):
    return CatalogSeeder(store, OTHER_HUB_ID)


@pytest.fixture
def admin_ctx():
    return CallerContext.create(HUB_ID, [ADMIN_ROLE])


@pytest.fixture
def manager_ctx():
    return CallerContext.create(HUB_ID, [ORDERS_MANAGER_ROLE])


@pytest.fixture
def guest_ctx():
    return CallerContext.create(HUB_ID, [])


@pytest.fixture
def other_hub_admin_ctx():
    return CallerContext.create(OTHER_HUB_ID, [ADMIN_ROLE])
