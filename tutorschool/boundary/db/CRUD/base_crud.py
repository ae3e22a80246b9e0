"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by entity-specific CRUD classes. Every entity in
this application is school scoped, so listing and bulk deletion accept
column equality filters.

Dependencies: sqlalchemy, uuid
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tutorschool.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def _filtered(self, stmt, filters: dict[str, Any]):
        for column, value in filters.items():
            stmt = stmt.where(getattr(self.model, column) == value)
        return stmt

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

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        """Retrieve a single record by primary key, None if missing."""
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
        **filters: Any,
    ) -> Sequence[ModelT]:
        """
        Retrieve records with optional equality filters and pagination.

        Args:
            session: Async database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip
            **filters: column=value pairs, e.g. school_id="school-1"

        Returns:
            Sequence of model instances, oldest first
        """
        stmt = self._filtered(select(self.model), filters)
        stmt = stmt.order_by(self.model.created_at).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        """Count records matching the equality filters."""
        stmt = self._filtered(select(func.count()).select_from(self.model), filters)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> ModelT | None:
        """
        Update a record by primary key.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
            .returning(self.model)
            .execution_options(synchronize_session="fetch")
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a record by primary key; False if it did not exist."""
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_where(self, session: AsyncSession, **filters: Any) -> int:
        """
        Delete every record matching the equality filters.

        Args:
            session: Async database session
            **filters: column=value pairs, at least one required

        Returns:
            Number of deleted rows

        Raises:
            ValueError: If no filter is given
        """
        if not filters:
            raise ValueError("delete_where requires at least one filter")
        stmt = self._filtered(delete(self.model), filters)
        result = await session.execute(stmt)
        return result.rowcount

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """Check if a record exists by primary key."""
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
