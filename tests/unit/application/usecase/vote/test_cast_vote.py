"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from menu.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from menu.domain.error import (
    AlreadyVotedError,
    NotAuthenticatedError,
    NotFoundError,
    StoreError,
)
from menu.domain.repository import SuggestionRepository, UnitOfWork, VoteRepository
from menu.domain.service import VoteService
from tests.conftest import make_suggestion
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_returns_authoritative_tally(self, unit_env):
        """Response carries the suggestion id and its count after the vote."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        repo = await unit_env.get(SuggestionRepository)
        suggestion = await repo.save(make_suggestion(vote_count=0))

        # Act
        response = await use_case.execute(
            CastVoteRequest(suggestion_id=suggestion.id, voter_id=uuid4())
        )

        # Assert
        assert response.suggestion.id == str(suggestion.id)
        assert response.suggestion.vote_count == 1

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        repo = await unit_env.get(SuggestionRepository)
        suggestion = await repo.save(make_suggestion())
        request = CastVoteRequest(suggestion_id=suggestion.id, voter_id=uuid4())
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_anonymous_vote_is_rejected_before_any_write(self, unit_env):
        """Without a voter nothing is recorded."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        repo = await unit_env.get(SuggestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        suggestion = await repo.save(make_suggestion())

        # Act & Assert
        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(CastVoteRequest(suggestion_id=suggestion.id))

        assert await vote_repo.count_by_suggestion(suggestion.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_suggestion_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(suggestion_id=uuid4(), voter_id=uuid4())
            )


class FailingUnitOfWork(UnitOfWork):
    """Unit of work whose commit loses the connection."""

    async def commit(self) -> None:
        raise OperationalError("COMMIT", {}, ConnectionResetError("connection lost"))


class TestCastVoteCommit:
    """The vote is committed before the tally is reported."""

    @pytest.mark.asyncio
    async def test_successful_vote_is_committed(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        repo = await unit_env.get(SuggestionRepository)
        suggestion = await repo.save(make_suggestion())

        # Act
        await use_case.execute(
            CastVoteRequest(suggestion_id=suggestion.id, voter_id=uuid4())
        )

        # Assert
        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_rejected_vote_is_not_committed(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(suggestion_id=uuid4(), voter_id=uuid4())
            )

        assert unit_of_work.commits == 0

    @pytest.mark.asyncio
    async def test_commit_failure_raises_store_error(self, unit_env):
        """A failed commit is reported instead of the tally."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        repo = await unit_env.get(SuggestionRepository)
        suggestion = await repo.save(make_suggestion())
        use_case = CastVoteUseCase(
            vote_service=vote_service, unit_of_work=FailingUnitOfWork()
        )

        # Act & Assert
        with pytest.raises(StoreError, match="Failed to commit vote"):
            await use_case.execute(
                CastVoteRequest(suggestion_id=suggestion.id, voter_id=uuid4())
            )
