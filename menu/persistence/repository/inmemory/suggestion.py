"""In-memory suggestion repository for testing."""

from typing import Optional

from menu.domain.model.suggestion import Suggestion
from menu.domain.repository.suggestion import SuggestionRepository
from menu.domain.value import DishCategory, SuggestionId, Weekday


class InMemorySuggestionRepository(SuggestionRepository):
    """In-memory implementation of SuggestionRepository for testing.

    Mutations contain no await, so each one is atomic on the event loop.
    """

    def __init__(self) -> None:
        self._suggestions: dict[SuggestionId, Suggestion] = {}

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        return self._suggestions.get(suggestion_id)

    async def find_by_id_for_update(
        self, suggestion_id: SuggestionId
    ) -> Optional[Suggestion]:
        """Find a suggestion by ID (no row locks in memory)."""
        return self._suggestions.get(suggestion_id)

    async def find_all(
        self,
        category: Optional[DishCategory] = None,
        day: Optional[Weekday] = None,
    ) -> list[Suggestion]:
        """Find suggestions ordered by creation time."""
        suggestions = list(self._suggestions.values())

        if category is not None:
            suggestions = [s for s in suggestions if s.category == category]
        if day is not None:
            suggestions = [s for s in suggestions if s.day == day]

        # Stable sort keeps insertion order for identical timestamps
        return sorted(suggestions, key=lambda s: s.created_at)

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Insert a suggestion."""
        self._suggestions[suggestion.id] = suggestion
        return suggestion

    async def increment_vote_count(self, suggestion_id: SuggestionId) -> Optional[int]:
        """Increment vote_count by 1."""
        suggestion = self._suggestions.get(suggestion_id)
        if suggestion is None:
            return None

        updated = suggestion.model_copy(
            update={"vote_count": suggestion.vote_count + 1}
        )
        self._suggestions[suggestion_id] = updated
        return updated.vote_count

    async def set_vote_count(
        self, suggestion_id: SuggestionId, vote_count: int
    ) -> Optional[int]:
        """Overwrite vote_count."""
        suggestion = self._suggestions.get(suggestion_id)
        if suggestion is None:
            return None

        self._suggestions[suggestion_id] = suggestion.model_copy(
            update={"vote_count": vote_count}
        )
        return vote_count
