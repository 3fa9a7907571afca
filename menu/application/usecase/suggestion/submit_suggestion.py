"""Submit suggestion use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field, model_validator

from menu.application.usecase.base import BaseUseCase, commit
from menu.domain.error import NotAuthenticatedError
from menu.domain.model.suggestion import Suggestion
from menu.domain.repository import UnitOfWork
from menu.domain.service import SuggestionResolver, SuggestionService
from menu.domain.value import DishCategory, DishId, ModerationStatus, UserId, Weekday
from menu.domain.value.types import DISH_NAME_MAX_LENGTH


class SuggestionPayload(BaseModel):
    """Client-supplied suggestion fields.

    Either ``dish_id`` (a catalog dish) or ``name`` (a new dish), never both.
    """

    dish_id: UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=DISH_NAME_MAX_LENGTH)
    category: DishCategory
    day: Weekday

    @model_validator(mode="after")
    def validate_dish_choice(self) -> "SuggestionPayload":
        """Require exactly one non-blank dish reference."""
        if self.name is not None and not self.name.strip():
            raise ValueError("name must not be blank")
        if (self.dish_id is None) == (self.name is None):
            raise ValueError("Exactly one of dish_id or name must be provided")
        return self


class SubmitSuggestionRequest(SuggestionPayload):
    """Submit suggestion request."""

    actor_id: UUID | None = None  # From the verified token; None if anonymous


class SuggestionItem(BaseModel):
    """Suggestion as returned to clients."""

    id: str
    dish_id: str
    dish_name: str
    category: DishCategory
    day: Weekday
    suggested_by: str
    status: ModerationStatus | None
    vote_count: int
    created_at: datetime
    reviewed_at: datetime | None = None
    reviewed_by: str | None = None

    @classmethod
    def from_domain(cls, suggestion: Suggestion, **extra) -> "SuggestionItem":
        """Build the response item from a domain suggestion."""
        return cls(
            id=str(suggestion.id),
            dish_id=str(suggestion.dish_id),
            dish_name=suggestion.dish_name.root,
            category=suggestion.category,
            day=suggestion.day,
            suggested_by=str(suggestion.suggested_by),
            status=suggestion.status,
            vote_count=suggestion.vote_count,
            created_at=suggestion.created_at,
            reviewed_at=suggestion.reviewed_at,
            reviewed_by=str(suggestion.reviewed_by) if suggestion.reviewed_by else None,
            **extra,
        )


class SubmitSuggestionResponse(BaseModel):
    """Submit suggestion response."""

    suggestion: SuggestionItem


class SubmitSuggestionUseCase(
    BaseUseCase[SubmitSuggestionRequest, SubmitSuggestionResponse]
):
    """Use case for suggesting a dish for a day and category."""

    def __init__(
        self,
        suggestion_resolver: SuggestionResolver,
        suggestion_service: SuggestionService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize submit suggestion use case.

        Args:
            suggestion_resolver: Resolves the dish reference
            suggestion_service: Suggestion domain service
            unit_of_work: Commits the new dish and suggestion together
        """
        self.suggestion_resolver = suggestion_resolver
        self.suggestion_service = suggestion_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: SubmitSuggestionRequest) -> SubmitSuggestionResponse:
        """Execute submit suggestion flow.

        Steps:
        1. Require an authenticated actor
        2. Resolve the dish (creating an inactive one for a new name)
        3. Store the suggestion
        4. Commit, so the response only reports durable writes

        The new dish and the suggestion are committed together. If a later
        step fails on PostgreSQL, the request transaction is rolled back and
        no dish is left behind. In-memory stores apply writes immediately,
        so there a dish created in step 2 remains (inactive, never listed).

        Args:
            request: Submit suggestion request (already shape-validated)

        Returns:
            The created suggestion

        Raises:
            NotAuthenticatedError: If there is no actor
            NotFoundError: If dish_id doesn't exist
            ValidationError: If the dish name is unusable
            StoreError: If the catalog or suggestion store, or the commit, fails
        """
        if request.actor_id is None:
            raise NotAuthenticatedError("suggest a dish")

        actor_id = UserId(request.actor_id)

        with logfire.span(
            "submit_suggestion.execute",
            actor_id=str(actor_id),
            category=request.category.value,
            day=request.day.value,
            new_dish=request.name is not None,
        ):
            dish_ref = await self.suggestion_resolver.resolve(
                existing_dish_id=DishId(request.dish_id) if request.dish_id else None,
                new_dish_name=request.name,
                category=request.category,
                actor_id=actor_id,
            )

            suggestion = await self.suggestion_service.create_suggestion(
                dish_ref=dish_ref,
                category=request.category,
                day=request.day,
                submitter_id=actor_id,
            )
            await commit(self.unit_of_work, "suggestion")

            logfire.info(
                "Suggestion submitted",
                suggestion_id=str(suggestion.id),
                dish_id=str(suggestion.dish_id),
            )

            return SubmitSuggestionResponse(
                suggestion=SuggestionItem.from_domain(suggestion)
            )
