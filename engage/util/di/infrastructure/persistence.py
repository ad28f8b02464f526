"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from engage.config import Settings
from engage.domain.repository import CommentRepository, LikeRepository, ViewRepository
from engage.persistence.database import create_engine, create_session_factory
from engage.persistence.repository import (
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresViewRepository,
)
from engage.util.di.base import ProviderBase
from engage.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide ``CommentRepository``, ``LikeRepository`` and
    ``ViewRepository`` in REQUEST scope, all sharing one unit of work.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one ``AsyncSession`` per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Create the engine; its pool is disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's unit of work.

        Commits when the request scope exits normally; any exception raised
        inside the scope rolls everything back, including writes that
        already succeeded earlier in the request.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Unit of work rolled back", error=str(e))
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def comments(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def likes(self, session: AsyncSession) -> LikeRepository:
        return PostgresLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def views(self, session: AsyncSession) -> ViewRepository:
        return PostgresViewRepository(session)
