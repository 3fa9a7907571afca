"""Application layer DI providers."""

from dishka import Scope, provide

from menu.application.usecase.dish import ListDishesUseCase
from menu.application.usecase.suggestion import (
    ListSuggestionsUseCase,
    SubmitSuggestionUseCase,
)
from menu.application.usecase.vote import CastVoteUseCase
from menu.domain.repository import UnitOfWork
from menu.domain.service import (
    DishService,
    SuggestionResolver,
    SuggestionService,
    VoteService,
)
from menu.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    # Suggestion use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_suggestion_use_case(
        self,
        suggestion_resolver: SuggestionResolver,
        suggestion_service: SuggestionService,
        unit_of_work: UnitOfWork,
    ) -> SubmitSuggestionUseCase:
        """Provide submit suggestion use case."""
        return SubmitSuggestionUseCase(
            suggestion_resolver=suggestion_resolver,
            suggestion_service=suggestion_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_suggestions_use_case(
        self, suggestion_service: SuggestionService, vote_service: VoteService
    ) -> ListSuggestionsUseCase:
        """Provide list suggestions use case."""
        return ListSuggestionsUseCase(
            suggestion_service=suggestion_service, vote_service=vote_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, unit_of_work: UnitOfWork
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, unit_of_work=unit_of_work)

    # Dish use cases
    @provide(scope=Scope.REQUEST)
    def get_list_dishes_use_case(self, dish_service: DishService) -> ListDishesUseCase:
        """Provide list dishes use case."""
        return ListDishesUseCase(dish_service=dish_service)
