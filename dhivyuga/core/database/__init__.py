"""
Centralized database layer for Dhivyuga.

Structure:
- entities/: SQLModel table classes, one module per table or table family
- repositories/: Async data access layer, one repository per table
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and table creation helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
]
