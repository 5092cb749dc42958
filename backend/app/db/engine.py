"""Database engine and session factory."""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from backend.app.config import Settings


def normalize_async_url(database_url: str) -> str:
    """Select the async driver for a database URL.

    postgresql:// becomes postgresql+asyncpg:// and sqlite:// becomes
    sqlite+aiosqlite://; URLs that already name a driver are left alone.
    """
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on FK enforcement for every new SQLite connection.

    SQLite ignores ON DELETE CASCADE unless the pragma is set per connection.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_async_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create async SQLAlchemy engine from settings.

    Raises:
        ValueError: If no database URL is configured.
    """
    database_url = settings.database_url or settings.postgres_url

    if not database_url:
        raise ValueError(
            "DATABASE_URL must be set to a valid connection string. "
            "Please configure the database_url setting."
        )

    database_url = normalize_async_url(database_url)

    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=settings.db_echo)
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_async_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        echo=settings.db_echo,
    )


def get_async_engine(request: Request) -> AsyncEngine:
    """Engine created by the application lifespan."""
    engine: AsyncEngine = request.app.state.engine
    return engine


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for a request-scoped async database session.

    The session is closed, returning its connection to the pool, on every
    exit path.

    Yields:
        AsyncSession instance
    """
    async with AsyncSession(get_async_engine(request), expire_on_commit=False) as session:
        yield session
