"""
Database Session Management Module

Async SQL engine and sessions for the activity log and the database
cache store (SQLite by default, PostgreSQL via asyncpg).
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from crud_backend.config import Settings, get_settings


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database

    SQLite connections are shared across threads by aiosqlite; PostgreSQL
    connections are checked before reuse.
    """
    if settings.DATABASE_TYPE == "sqlite":
        options = {"connect_args": {"check_same_thread": False}}
    else:
        options = {"pool_pre_ping": True}
    # echo prints SQL statements in DEBUG mode
    return create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG, **options)


engine = build_engine(get_settings())

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session, rolling back if the request fails

    Used as a FastAPI dependency and by scheduled tasks.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create the activity log and cache tables. Called on application startup."""
    from crud_backend.db.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose the engine's connection pool. Called on application shutdown."""
    await engine.dispose()
