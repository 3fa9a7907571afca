"""Vote ledger domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from menu.domain.error import AlreadyVotedError, NotFoundError, StoreError
from menu.domain.model.vote import Vote
from menu.domain.repository import VoteRepository
from menu.domain.value import SuggestionId, UserId, VoteId

from .base import STORE_FAILURES, Service
from .suggestion_service import SuggestionService


class VoteService(Service):
    """Domain service for the vote ledger.

    The ledger row is the source of truth; the suggestion's vote_count is a
    cache kept in step with it inside the same transaction.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        suggestion_service: SuggestionService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            suggestion_service: Suggestion domain service
        """
        self.vote_repository = vote_repository
        self.suggestion_service = suggestion_service

    async def cast_vote(self, suggestion_id: SuggestionId, voter_id: UserId) -> int:
        """Record a vote and bump the suggestion's tally.

        The unique (suggestion, voter) insert serializes concurrent attempts:
        exactly one wins, the rest get AlreadyVotedError and leave the tally
        alone. The increment is a single store-side update.

        Args:
            suggestion_id: Suggestion ID
            voter_id: Voting user

        Returns:
            The tally after this vote

        Raises:
            NotFoundError: If the suggestion doesn't exist
            AlreadyVotedError: If the voter already voted on this suggestion
            StoreError: If the store fails
        """
        with logfire.span(
            "vote_service.cast_vote",
            suggestion_id=str(suggestion_id),
            voter_id=str(voter_id),
        ):
            suggestion = await self.suggestion_service.get_suggestion_by_id(
                suggestion_id
            )
            if not suggestion:
                raise NotFoundError("Suggestion", str(suggestion_id))

            vote = Vote(
                id=VoteId(uuid4()),
                suggestion_id=suggestion_id,
                voter_id=voter_id,
                created_at=datetime.now(),
            )

            try:
                await self.vote_repository.save(vote)
            except IntegrityError:
                # Expected outcome of a double click or a race, not a fault
                logfire.info(
                    "Duplicate vote rejected",
                    suggestion_id=str(suggestion_id),
                    voter_id=str(voter_id),
                )
                raise AlreadyVotedError(str(suggestion_id), str(voter_id))
            except STORE_FAILURES as e:
                logfire.error(
                    "Vote insert failed",
                    suggestion_id=str(suggestion_id),
                    error=str(e),
                )
                raise StoreError(f"Failed to record vote: {e}") from e

            try:
                vote_count = await self.suggestion_service.increment_vote_count(
                    suggestion_id
                )
            except STORE_FAILURES as e:
                logfire.error(
                    "Vote tally increment failed",
                    suggestion_id=str(suggestion_id),
                    error=str(e),
                )
                raise StoreError(f"Failed to update vote count: {e}") from e

            if vote_count is None:
                raise NotFoundError("Suggestion", str(suggestion_id))

            logfire.info(
                "Vote recorded",
                suggestion_id=str(suggestion_id),
                voter_id=str(voter_id),
                vote_count=vote_count,
            )
            return vote_count

    async def count_votes(self, suggestion_id: SuggestionId) -> int:
        """Count ledger entries for a suggestion (live, uncached).

        Args:
            suggestion_id: Suggestion ID

        Returns:
            Number of votes in the ledger
        """
        with logfire.span("vote_service.count_votes", suggestion_id=str(suggestion_id)):
            try:
                return await self.vote_repository.count_by_suggestion(suggestion_id)
            except STORE_FAILURES as e:
                raise StoreError(f"Failed to count votes: {e}") from e

    async def reconcile_tally(self, suggestion_id: SuggestionId) -> int:
        """Rewrite the cached vote_count from the ledger.

        The suggestion row is locked before counting so a vote committing in
        between cannot be lost.

        Args:
            suggestion_id: Suggestion ID

        Returns:
            The reconciled tally

        Raises:
            NotFoundError: If the suggestion doesn't exist
            StoreError: If the store fails
        """
        with logfire.span(
            "vote_service.reconcile_tally", suggestion_id=str(suggestion_id)
        ):
            try:
                suggestion = await self.suggestion_service.lock_suggestion(
                    suggestion_id
                )
                if not suggestion:
                    raise NotFoundError("Suggestion", str(suggestion_id))

                live_count = await self.vote_repository.count_by_suggestion(
                    suggestion_id
                )
                if live_count != suggestion.vote_count:
                    logfire.warn(
                        "Vote tally drift corrected",
                        suggestion_id=str(suggestion_id),
                        cached=suggestion.vote_count,
                        live=live_count,
                    )
                    await self.suggestion_service.set_vote_count(
                        suggestion_id, live_count
                    )
            except STORE_FAILURES as e:
                raise StoreError(f"Failed to reconcile vote count: {e}") from e

            return live_count

    async def get_voted_suggestion_ids(
        self, voter_id: UserId, suggestion_ids: list[SuggestionId]
    ) -> set[SuggestionId]:
        """Check which suggestions a user has voted on.

        Args:
            voter_id: User ID
            suggestion_ids: Suggestion IDs to check

        Returns:
            The subset of suggestion_ids the user voted on
        """
        if not suggestion_ids:
            return set()

        try:
            votes = await self.vote_repository.find_by_voter_and_suggestions(
                voter_id=voter_id, suggestion_ids=suggestion_ids
            )
        except STORE_FAILURES as e:
            raise StoreError(f"Failed to fetch votes: {e}") from e

        return {vote.suggestion_id for vote in votes}
