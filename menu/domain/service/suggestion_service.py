"""Suggestion domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from menu.domain.error import StoreError
from menu.domain.model.suggestion import Suggestion
from menu.domain.repository import SuggestionRepository
from menu.domain.value import (
    DishCategory,
    DishRef,
    ModerationStatus,
    SuggestionId,
    UserId,
    Weekday,
)

from .base import STORE_FAILURES, Service


class SuggestionService(Service):
    """Domain service for suggestion operations."""

    def __init__(self, suggestion_repository: SuggestionRepository) -> None:
        """Initialize suggestion service.

        Args:
            suggestion_repository: Suggestion repository
        """
        self.suggestion_repository = suggestion_repository

    async def create_suggestion(
        self,
        dish_ref: DishRef,
        category: DishCategory,
        day: Weekday,
        submitter_id: UserId,
    ) -> Suggestion:
        """Create a suggestion for a resolved dish.

        Suggestions for newly created dishes start as pending; suggestions for
        catalog dishes carry no moderation status.

        Args:
            dish_ref: Dish reference from the resolver
            category: Menu category
            day: Weekday
            submitter_id: Suggesting user

        Returns:
            The stored suggestion with its id and timestamp

        Raises:
            StoreError: If the insert fails
        """
        with logfire.span(
            "suggestion_service.create_suggestion",
            dish_id=str(dish_ref.dish_id),
            category=category.value,
            day=day.value,
            is_new_dish=dish_ref.is_new,
        ):
            suggestion = Suggestion(
                id=SuggestionId(uuid4()),
                dish_id=dish_ref.dish_id,
                dish_name=dish_ref.name,
                category=category,
                day=day,
                suggested_by=submitter_id,
                status=ModerationStatus.PENDING if dish_ref.is_new else None,
                vote_count=0,
                created_at=datetime.now(),
            )

            try:
                saved = await self.suggestion_repository.save(suggestion)
            except STORE_FAILURES as e:
                # The request rolls back, taking a dish created by the resolver with it
                logfire.error(
                    "Suggestion insert failed",
                    dish_id=str(dish_ref.dish_id),
                    is_new_dish=dish_ref.is_new,
                    error=str(e),
                )
                raise StoreError(str(e)) from e

            logfire.info(
                "Suggestion created",
                suggestion_id=str(saved.id),
                status=saved.status.value if saved.status else None,
            )
            return saved

    async def get_suggestion_by_id(
        self, suggestion_id: SuggestionId
    ) -> Suggestion | None:
        """Get a suggestion by ID.

        Args:
            suggestion_id: Suggestion ID

        Returns:
            Suggestion if found, None otherwise

        Raises:
            StoreError: If the lookup fails
        """
        with logfire.span(
            "suggestion_service.get_suggestion_by_id", suggestion_id=str(suggestion_id)
        ):
            try:
                suggestion = await self.suggestion_repository.find_by_id(suggestion_id)
            except STORE_FAILURES as e:
                logfire.error(
                    "Suggestion lookup failed",
                    suggestion_id=str(suggestion_id),
                    error=str(e),
                )
                raise StoreError(f"Failed to fetch suggestion: {e}") from e

            if not suggestion:
                logfire.warn("Suggestion not found", suggestion_id=str(suggestion_id))

            return suggestion

    async def get_suggestions(
        self,
        category: DishCategory | None = None,
        day: Weekday | None = None,
    ) -> list[Suggestion]:
        """Get suggestions ordered by creation time (oldest first).

        Args:
            category: Optional category filter
            day: Optional day filter

        Returns:
            Matching suggestions

        Raises:
            StoreError: If the query fails
        """
        with logfire.span(
            "suggestion_service.get_suggestions",
            category=category.value if category else None,
            day=day.value if day else None,
        ):
            try:
                suggestions = await self.suggestion_repository.find_all(
                    category=category, day=day
                )
            except STORE_FAILURES as e:
                logfire.error("Suggestion listing failed", error=str(e))
                raise StoreError(f"Failed to fetch suggestions: {e}") from e

            logfire.info("Suggestions retrieved", count=len(suggestions))
            return suggestions

    async def increment_vote_count(self, suggestion_id: SuggestionId) -> int | None:
        """Atomically bump the cached tally.

        Args:
            suggestion_id: Suggestion ID

        Returns:
            New vote_count, or None if the suggestion doesn't exist
        """
        return await self.suggestion_repository.increment_vote_count(suggestion_id)

    async def lock_suggestion(self, suggestion_id: SuggestionId) -> Suggestion | None:
        """Load a suggestion and hold its row lock until the transaction ends.

        Args:
            suggestion_id: Suggestion ID

        Returns:
            Suggestion if found, None otherwise
        """
        return await self.suggestion_repository.find_by_id_for_update(suggestion_id)

    async def set_vote_count(
        self, suggestion_id: SuggestionId, vote_count: int
    ) -> int | None:
        """Overwrite the cached tally.

        Args:
            suggestion_id: Suggestion ID
            vote_count: Value to store

        Returns:
            Stored vote_count, or None if the suggestion doesn't exist
        """
        return await self.suggestion_repository.set_vote_count(
            suggestion_id, vote_count
        )
