"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from menu.domain.model.vote import Vote
from menu.domain.repository.vote import VoteRepository
from menu.domain.value import SuggestionId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Keyed by (suggestion_id, voter_id) to mirror the unique constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[SuggestionId, UserId], Vote] = {}

    async def find_by_suggestion_and_voter(
        self, suggestion_id: SuggestionId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a suggestion."""
        return self._votes.get((suggestion_id, voter_id))

    async def find_by_suggestion(self, suggestion_id: SuggestionId) -> list[Vote]:
        """Find all votes on a suggestion."""
        return [v for v in self._votes.values() if v.suggestion_id == suggestion_id]

    async def save(self, vote: Vote) -> Vote:
        """Record a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        key = (vote.suggestion_id, vote.voter_id)
        # Check and insert without yielding to the event loop
        if key in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[key] = vote
        return vote

    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion."""
        return sum(1 for v in self._votes.values() if v.suggestion_id == suggestion_id)

    async def find_by_voter_and_suggestions(
        self, voter_id: UserId, suggestion_ids: Sequence[SuggestionId]
    ) -> list[Vote]:
        """Find a voter's votes on multiple suggestions (batch query)."""
        if not suggestion_ids:
            return []

        wanted = set(suggestion_ids)
        return [
            v
            for v in self._votes.values()
            if v.voter_id == voter_id and v.suggestion_id in wanted
        ]
