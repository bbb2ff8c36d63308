"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes. Every method that
takes an id accepts any representation and canonicalises it first; an
unparseable id behaves like a missing row.

Dependencies: sqlalchemy, blogger.core.identifiers
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Iterable, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.boundary.db.base import Base
from blogger.core.identifiers import canonical_id

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and can override or extend
    these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Primary key in any representation

        Returns:
            Model instance if found, None otherwise
        """
        record_id = canonical_id(id)
        if record_id is None:
            return None
        stmt = select(self.model).where(self.model.id == record_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(
        self,
        session: AsyncSession,
        ids: Iterable[Any],
    ) -> dict[UUID, ModelT]:
        """
        Retrieve several records by primary key in one query.

        Args:
            session: Async database session
            ids: Primary keys; malformed ones are skipped

        Returns:
            Mapping of id to instance for the rows that exist
        """
        wanted = {record_id for record_id in map(canonical_id, ids) if record_id is not None}
        if not wanted:
            return {}
        stmt = select(self.model).where(self.model.id.in_(wanted))
        result = await session.execute(stmt)
        return {instance.id: instance for instance in result.scalars().all()}

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records, oldest first, with optional pagination.

        Args:
            session: Async database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = (
            select(self.model)
            .order_by(self.model.created_at, self.model.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_id(self, session: AsyncSession, id: Any) -> bool:
        """
        Delete a record by primary key.

        Goes through the ORM so relationship cascades apply.

        Args:
            session: Async database session
            id: Primary key in any representation

        Returns:
            True if record was deleted, False if not found
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return False
        await session.delete(instance)
        await session.flush()
        return True
