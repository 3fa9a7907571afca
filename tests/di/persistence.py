"""Mock persistence providers for testing."""

from dishka import Scope, provide

from menu.domain.repository import (
    DishRepository,
    SuggestionRepository,
    UnitOfWork,
    VoteRepository,
)
from menu.persistence.repository.inmemory import (
    InMemoryDishRepository,
    InMemorySuggestionRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from menu.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so one container behaves like one database:
    every request opened on it (including those made through the API test
    client) sees the same data. Each test builds its own container, so tests
    stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_dish_repository(self) -> DishRepository:
        """Provide in-memory dish repository."""
        return InMemoryDishRepository()

    @provide(scope=Scope.APP)
    def get_suggestion_repository(self) -> SuggestionRepository:
        """Provide in-memory suggestion repository."""
        return InMemorySuggestionRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork()
