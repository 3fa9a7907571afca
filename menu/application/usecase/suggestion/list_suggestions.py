"""List suggestions use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from menu.application.usecase.base import BaseUseCase
from menu.domain.service import SuggestionService, VoteService
from menu.domain.value import DishCategory, UserId, Weekday

from .submit_suggestion import SuggestionItem


class ListedSuggestionItem(SuggestionItem):
    """Suggestion in a listing."""

    has_voted: bool | None = None  # None when the viewer is anonymous


class ListSuggestionsRequest(BaseModel):
    """List suggestions request."""

    category: DishCategory | None = None
    day: Weekday | None = None
    viewer_id: UUID | None = None


class ListSuggestionsResponse(BaseModel):
    """List suggestions response."""

    suggestions: list[ListedSuggestionItem]


class ListSuggestionsUseCase(
    BaseUseCase[ListSuggestionsRequest, ListSuggestionsResponse]
):
    """Use case for listing suggestions, oldest first."""

    def __init__(
        self, suggestion_service: SuggestionService, vote_service: VoteService
    ) -> None:
        """Initialize list suggestions use case.

        Args:
            suggestion_service: Suggestion domain service
            vote_service: Vote domain service
        """
        self.suggestion_service = suggestion_service
        self.vote_service = vote_service

    async def execute(self, request: ListSuggestionsRequest) -> ListSuggestionsResponse:
        """Execute list suggestions flow.

        Args:
            request: Optional filters and viewer

        Returns:
            Suggestions ordered by creation time, flagged with the viewer's
            votes when a viewer is given
        """
        with logfire.span(
            "list_suggestions.execute",
            category=request.category.value if request.category else None,
            day=request.day.value if request.day else None,
        ):
            suggestions = await self.suggestion_service.get_suggestions(
                category=request.category, day=request.day
            )

            voted_ids = None
            if request.viewer_id is not None:
                voted_ids = await self.vote_service.get_voted_suggestion_ids(
                    UserId(request.viewer_id), [s.id for s in suggestions]
                )

            items = [
                ListedSuggestionItem.from_domain(
                    s, has_voted=(s.id in voted_ids) if voted_ids is not None else None
                )
                for s in suggestions
            ]

            return ListSuggestionsResponse(suggestions=items)
