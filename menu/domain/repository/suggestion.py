"""Suggestion repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from menu.domain.model.suggestion import Suggestion
from menu.domain.value import DishCategory, SuggestionId, Weekday


class SuggestionRepository(ABC):
    """Repository for Suggestion aggregate.

    Defines the contract for suggestion persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID.

        Args:
            suggestion_id: The suggestion's unique identifier

        Returns:
            The suggestion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, suggestion_id: SuggestionId
    ) -> Optional[Suggestion]:
        """Find a suggestion by ID and lock its row for the current transaction.

        Args:
            suggestion_id: The suggestion's unique identifier

        Returns:
            The suggestion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[DishCategory] = None,
        day: Optional[Weekday] = None,
    ) -> List[Suggestion]:
        """Find suggestions ordered by creation time (oldest first).

        Args:
            category: Only return suggestions in this category
            day: Only return suggestions for this day

        Returns:
            Matching suggestions
        """
        pass

    @abstractmethod
    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Insert a new suggestion.

        Args:
            suggestion: The suggestion to insert

        Returns:
            The stored suggestion
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, suggestion_id: SuggestionId) -> Optional[int]:
        """Atomically increment vote_count by 1.

        Must be a single store-side update (no read-modify-write), so
        concurrent voters never lose increments.

        Args:
            suggestion_id: The suggestion ID

        Returns:
            The new vote_count, or None if the suggestion doesn't exist
        """
        pass

    @abstractmethod
    async def set_vote_count(
        self, suggestion_id: SuggestionId, vote_count: int
    ) -> Optional[int]:
        """Overwrite the cached vote_count.

        Only used to repair the cache from the live ledger count.

        Args:
            suggestion_id: The suggestion ID
            vote_count: The value to store

        Returns:
            The stored vote_count, or None if the suggestion doesn't exist
        """
        pass
