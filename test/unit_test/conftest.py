"""
Shared database fixtures for unit tests.

Every test gets a fresh in-memory SQLite database (one shared connection via
``StaticPool``) with all tables created and foreign keys enforced.
"""

from typing import AsyncGenerator, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from dhivyuga.core.database import create_all, create_engine, create_sessionmaker
from dhivyuga.core.database.entities import ROLE_ADMIN, ROLE_USER, Profile
from dhivyuga.server.services.security import build_access_token, hash_password


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_PASSWORD = "admin-password-123"
USER_PASSWORD = "user-password-123"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with all tables."""
    engine = create_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with session_maker() as session:
        yield session


class Seeder:
    """Insert rows through short-lived sessions so API requests see committed data."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    async def add(self, *entities):
        async with self._session_maker() as session:
            session.add_all(entities)
            await session.commit()
            for entity in entities:
                await session.refresh(entity)
        return entities[0] if len(entities) == 1 else entities

    async def get(self, model, entity_id):
        async with self._session_maker() as session:
            return await session.get(model, entity_id)


@pytest_asyncio.fixture
async def seed(session_maker) -> Seeder:
    return Seeder(session_maker)


@pytest_asyncio.fixture
async def admin_profile(seed: Seeder) -> Profile:
    return await seed.add(
        Profile(
            email="admin@dhivyuga.test",
            full_name="Admin",
            role=ROLE_ADMIN,
            password_hash=hash_password(ADMIN_PASSWORD),
        )
    )


@pytest_asyncio.fixture
async def user_profile(seed: Seeder) -> Profile:
    return await seed.add(
        Profile(
            email="user@dhivyuga.test",
            full_name="Reader",
            role=ROLE_USER,
            password_hash=hash_password(USER_PASSWORD),
        )
    )


def _bearer(profile: Profile) -> Dict[str, str]:
    token = build_access_token(profile_id=str(profile.id), email=profile.email, role=profile.role)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def admin_headers(admin_profile: Profile) -> Dict[str, str]:
    return _bearer(admin_profile)


@pytest_asyncio.fixture
async def user_headers(user_profile: Profile) -> Dict[str, str]:
    return _bearer(user_profile)


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client whose requests use the test database."""
    from dhivyuga.core.database import get_session
    from dhivyuga.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
