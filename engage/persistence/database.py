"""Async engine and session factory for PostgreSQL (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from engage.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the process-wide engine.

    Args:
        database: Connection URL and pool sizing
        echo: Log every statement (debug mode)
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Repositories hand out immutable domain models rather than ORM objects,
    so nothing needs refreshing after commit and statements are flushed
    explicitly.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
