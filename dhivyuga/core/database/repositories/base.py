"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns used across all
repository implementations in the centralized database layer. Repositories
wrap an ``AsyncSession`` and commit their own writes.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from dhivyuga.core.logging_config import get_logger

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def update(self, entity: EntityType, changes: Dict[str, Any]) -> EntityType:
        """Apply changes to an existing entity record.

        Args:
            entity: Persisted SQLModel instance
            changes: Field values to set

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete(self, entity_id: uuid.UUID) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a select statement, skipping ``None`` values.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


class SqlModelRepository(AsyncBaseRepository[EntityType]):
    """Plain CRUD repository for a single SQLModel table.

    Subclasses set ``default_order`` to the columns listings are sorted by and
    add their table-specific queries.
    """

    default_order: Sequence[Any] = ()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.warning(f"Integrity error while writing {self.model.__name__}", exc_info=True)
            raise

    async def create(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: uuid.UUID) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def update(self, entity: EntityType, changes: Dict[str, Any]) -> EntityType:
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: uuid.UUID) -> bool:
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self._commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        stmt = select(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        if self.default_order:
            stmt = stmt.order_by(*self.default_order)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return int(result.scalar_one())

    async def values_starting_with(self, column: Any, prefix: str, limit: int) -> List[str]:
        """Return values of ``column`` that start with ``prefix``, case-insensitively.

        ``%`` and ``_`` in the prefix are matched literally.
        """
        stmt = select(column).where(column.istartswith(prefix, autoescape=True)).order_by(column).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
