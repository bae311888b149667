"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from dhivyuga.core.logging_config import get_logger
from dhivyuga.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database.

    Alembic migrations own the schema in production, so this only creates
    tables when ``DHIVYUGA_DB_AUTO_CREATE`` is set (local development).
    """
    if not settings.db_auto_create:
        logger.debug("Skipping table creation; schema is managed by Alembic")
        return
    logger.info("Creating database tables from ORM metadata")
    await create_all(engine)
