"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from menu.domain.model.vote import Vote
from menu.domain.value import SuggestionId, UserId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_suggestion_and_voter(
        self, suggestion_id: SuggestionId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a suggestion.

        Args:
            suggestion_id: ID of the suggestion
            voter_id: The voter's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_suggestion(self, suggestion_id: SuggestionId) -> List[Vote]:
        """Find all votes on a suggestion.

        Args:
            suggestion_id: ID of the suggestion

        Returns:
            List of votes on the suggestion
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Record a vote.

        The (suggestion_id, voter_id) pair is unique; this write is the
        serialization point for concurrent voters.

        Args:
            vote: The vote to record

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already voted on this suggestion
        """
        pass

    @abstractmethod
    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count ledger entries for a suggestion.

        Args:
            suggestion_id: ID of the suggestion

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def find_by_voter_and_suggestions(
        self, voter_id: UserId, suggestion_ids: Sequence[SuggestionId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple suggestions (batch query).

        Args:
            voter_id: The voter's ID
            suggestion_ids: Suggestion IDs to check

        Returns:
            Votes by the voter on the given suggestions
        """
        pass
