"""Fixtures for end-to-end tests against a real PostgreSQL server.

A PostgreSQL container is started once per session with Testcontainers and
migrated to the head revision with Alembic. Tests are skipped when no
container runtime is available.
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from alembic import command
from alembic.config import Config
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from testcontainers.postgres import PostgresContainer

from dhivyuga.core.database import create_engine, create_sessionmaker
from dhivyuga.core.database.utils import normalize_database_url

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


@pytest.fixture(scope="session")
def postgres_container():
    """Start a PostgreSQL container for the test session."""
    container = PostgresContainer("postgres:16-alpine")
    try:
        container.start()
    except Exception as exc:
        pytest.skip(f"PostgreSQL container could not be started: {exc}")
    yield container
    container.stop()


@pytest.fixture(scope="session")
def alembic_config(postgres_container) -> Config:
    config = Config()
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", normalize_database_url(postgres_container.get_connection_url()))
    return config


@pytest.fixture(scope="session")
def database_url(alembic_config: Config) -> str:
    """Migrate the container database to head and return its async URL."""
    command.upgrade(alembic_config, "head")
    yield alembic_config.get_main_option("sqlalchemy.url")
    command.downgrade(alembic_config, "base")


@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(database_url)
    yield engine
    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE mantras, deities, categories CASCADE"))
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)
