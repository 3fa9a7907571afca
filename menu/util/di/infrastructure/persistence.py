"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from menu.config import Settings
from menu.domain.repository import (
    DishRepository,
    SuggestionRepository,
    UnitOfWork,
    VoteRepository,
)
from menu.persistence.database import create_engine, create_session_factory
from menu.persistence.repository import (
    PostgresDishRepository,
    PostgresSuggestionRepository,
    PostgresVoteRepository,
)
from menu.persistence.unit_of_work import SQLAlchemyUnitOfWork
from menu.util.di.base import ProviderBase
from menu.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the database engine for the container's lifetime.

        The engine's pool is disposed when the container closes at shutdown.
        """
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Nothing is committed here: write use cases commit through the
        UnitOfWork before the response is built. Whatever is still pending
        when the request ends (a failed or read-only request) is rolled back.
        """
        async with session_factory() as session:
            exc = yield session
            if session.in_transaction():
                if exc is not None:
                    logfire.warn("Session rollback", error=str(exc))
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_dish_repository(self, session: AsyncSession) -> DishRepository:
        """Provide Dish repository."""
        return PostgresDishRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_suggestion_repository(self, session: AsyncSession) -> SuggestionRepository:
        """Provide Suggestion repository."""
        return PostgresSuggestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the unit of work over the request's session."""
        return SQLAlchemyUnitOfWork(session)
