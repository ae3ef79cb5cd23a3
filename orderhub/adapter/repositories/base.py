from typing import List, Sequence, Tuple, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from orderhub.app.repositories.errors import RepositoryConflictError, RepositoryError
from orderhub.app.repositories.queries import ListQuery

ModelT = TypeVar("ModelT", bound=SQLModel)


def like_pattern(term: str) -> str:
    """Substring pattern for ILIKE with wildcard characters escaped"""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlModelRepository:
    """Shared session plumbing; translates engine errors into repository errors"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _exec(self, statement):
        try:
            return await self.session.exec(statement)
        except SQLAlchemyError as exc:
            raise RepositoryError("Query failed") from exc

    async def _execute(self, statement):
        try:
            return await self.session.execute(statement)
        except IntegrityError as exc:
            raise RepositoryConflictError("Statement violates a constraint") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError("Statement failed") from exc

    async def _save(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        try:
            await self.session.flush()
            await self.session.refresh(entity)
        except IntegrityError as exc:
            raise RepositoryConflictError(
                f"{type(entity).__name__} violates a unique constraint"
            ) from exc
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to save {type(entity).__name__}") from exc
        return entity

    async def _save_all(self, entities: Sequence[ModelT]) -> List[ModelT]:
        self.session.add_all(entities)
        try:
            await self.session.flush()
            for entity in entities:
                await self.session.refresh(entity)
        except IntegrityError as exc:
            raise RepositoryConflictError("Batch violates a unique constraint") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to save batch") from exc
        return list(entities)

    async def _delete(self, entity: SQLModel) -> None:
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to delete {type(entity).__name__}") from exc

    async def _page(
        self, model: Type[ModelT], conditions: list, query: ListQuery
    ) -> Tuple[int, List[ModelT]]:
        """Count and fetch one page ordered by id"""
        count_stmt = select(func.count()).select_from(model).where(*conditions)
        total = (await self._exec(count_stmt)).one()

        stmt = select(model).where(*conditions).order_by(model.id).offset(query.offset)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        result = await self._exec(stmt)
        return total, list(result.all())
