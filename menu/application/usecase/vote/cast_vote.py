"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from menu.application.usecase.base import BaseUseCase, commit
from menu.domain.error import NotAuthenticatedError
from menu.domain.repository import UnitOfWork
from menu.domain.service import VoteService
from menu.domain.value import SuggestionId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    suggestion_id: UUID
    voter_id: UUID | None = None  # From the verified token; None if anonymous


class VoteTally(BaseModel):
    """Authoritative tally after the vote."""

    id: str
    vote_count: int


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    suggestion: VoteTally


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a suggestion."""

    def __init__(self, vote_service: VoteService, unit_of_work: UnitOfWork) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Commits the ledger entry and tally together
        """
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The suggestion's tally after the write has been committed

        Raises:
            NotAuthenticatedError: If there is no voter
            NotFoundError: If the suggestion doesn't exist
            AlreadyVotedError: If the voter already voted on it
            StoreError: If the store or the commit fails
        """
        if request.voter_id is None:
            raise NotAuthenticatedError("vote")

        suggestion_id = SuggestionId(request.suggestion_id)
        vote_count = await self.vote_service.cast_vote(
            suggestion_id, UserId(request.voter_id)
        )
        await commit(self.unit_of_work, "vote")

        return CastVoteResponse(
            suggestion=VoteTally(id=str(suggestion_id), vote_count=vote_count)
        )
