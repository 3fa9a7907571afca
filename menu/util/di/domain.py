"""Domain layer DI providers."""

from dishka import Scope, provide

from menu.config import AuthSettings
from menu.domain.repository import (
    DishRepository,
    SuggestionRepository,
    VoteRepository,
)
from menu.domain.service import (
    DishService,
    JWTService,
    SuggestionResolver,
    SuggestionService,
    VoteService,
)
from menu.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless, shared)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_dish_service(self, dish_repository: DishRepository) -> DishService:
        """Provide dish catalog domain service."""
        return DishService(dish_repository=dish_repository)

    @provide
    def get_suggestion_resolver(self, dish_service: DishService) -> SuggestionResolver:
        """Provide suggestion resolver."""
        return SuggestionResolver(dish_service=dish_service)

    @provide
    def get_suggestion_service(
        self, suggestion_repository: SuggestionRepository
    ) -> SuggestionService:
        """Provide suggestion domain service."""
        return SuggestionService(suggestion_repository=suggestion_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        suggestion_service: SuggestionService,
    ) -> VoteService:
        """Provide vote ledger domain service."""
        return VoteService(
            vote_repository=vote_repository,
            suggestion_service=suggestion_service,
        )
