"""Shared pytest fixtures for all test suites."""

from collections.abc import AsyncGenerator
from decimal import Decimal
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from backend.app.db.engine import enable_sqlite_foreign_keys, get_session
from backend.app.db.models import Base, Destination, User
from backend.app.main import app

OWNER_ID = 1
OTHER_USER_ID = 2
GOA_ID = 1


@pytest_asyncio.fixture
async def test_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create async engine on a per-test SQLite file with foreign keys enforced."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'travelmate.db'}",
        poolclass=NullPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine: AsyncEngine) -> AsyncEngine:
    """Engine with two users and one destination already stored."""
    async with AsyncSession(test_engine) as session:
        session.add_all(
            [
                User(
                    id=OWNER_ID,
                    name="Ananya Sharma",
                    email="ananya@example.com",
                    password_hash="x",
                ),
                User(
                    id=OTHER_USER_ID,
                    name="Rahul Kumar",
                    email="rahul@example.com",
                    password_hash="x",
                ),
                Destination(
                    id=GOA_ID,
                    name="Goa",
                    category="beach",
                    state="Goa",
                    description="Sun, sand, and sea",
                    image_url="https://example.com/goa.jpg",
                    rating=Decimal("4.8"),
                    avg_cost=Decimal("15000"),
                    popular=True,
                ),
            ]
        )
        await session.commit()

    return test_engine


@pytest_asyncio.fixture
async def session_factory(test_db: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Factory for fresh sessions; each step of a test uses its own session."""
    return async_sessionmaker(test_db, expire_on_commit=False)


@pytest_asyncio.fixture
async def api_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the session bound to the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()

