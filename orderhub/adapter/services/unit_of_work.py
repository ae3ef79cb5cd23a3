from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from orderhub.adapter.repositories.category_repository import CategoryRepository
from orderhub.adapter.repositories.customer_repository import CustomerRepository
from orderhub.adapter.repositories.discount_assignment_repository import (
    DiscountAssignmentRepository,
)
from orderhub.adapter.repositories.order_repository import OrderRepository
from orderhub.adapter.repositories.price_level_repository import PriceLevelRepository
from orderhub.adapter.repositories.product_repository import ProductRepository
from orderhub.adapter.repositories.tag_repository import TagRepository
from orderhub.app.repositories.errors import RepositoryConflictError, RepositoryError
from orderhub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.products = ProductRepository(self.session)
        self.price_levels = PriceLevelRepository(self.session)
        self.categories = CategoryRepository(self.session)
        self.tags = TagRepository(self.session)
        self.customers = CustomerRepository(self.session)
        self.discounts = DiscountAssignmentRepository(self.session)
        self.orders = OrderRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # No-op after a successful commit; discards everything otherwise
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as exc:
            raise RepositoryConflictError("Commit violates a constraint") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError("Commit failed") from exc

    async def rollback(self):
        await self.session.rollback()
