"""Unit tests for ListSuggestionsUseCase."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from menu.application.usecase.suggestion import (
    ListSuggestionsRequest,
    ListSuggestionsUseCase,
)
from menu.domain.repository import SuggestionRepository
from menu.domain.service import VoteService
from menu.domain.value import DishCategory, UserId, Weekday
from tests.conftest import make_dish, make_suggestion
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListSuggestionsUseCase:
    """Tests for ListSuggestionsUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_listing_has_no_vote_flags(self, unit_env):
        """Anonymous viewers get suggestions oldest first, without has_voted."""
        # Arrange
        use_case = await unit_env.get(ListSuggestionsUseCase)
        repo = await unit_env.get(SuggestionRepository)
        now = datetime.now()
        second = await repo.save(make_suggestion(created_at=now))
        first = await repo.save(make_suggestion(created_at=now - timedelta(minutes=5)))

        # Act
        response = await use_case.execute(ListSuggestionsRequest())

        # Assert
        assert [s.id for s in response.suggestions] == [str(first.id), str(second.id)]
        assert all(s.has_voted is None for s in response.suggestions)

    @pytest.mark.asyncio
    async def test_viewer_sees_own_votes(self, unit_env):
        """An authenticated viewer gets has_voted per suggestion."""
        # Arrange
        use_case = await unit_env.get(ListSuggestionsUseCase)
        vote_service = await unit_env.get(VoteService)
        repo = await unit_env.get(SuggestionRepository)
        voted = await repo.save(make_suggestion())
        other = await repo.save(make_suggestion())
        viewer = UserId(uuid4())
        await vote_service.cast_vote(voted.id, viewer)

        # Act
        response = await use_case.execute(ListSuggestionsRequest(viewer_id=viewer))

        # Assert
        flags = {s.id: (s.has_voted, s.vote_count) for s in response.suggestions}
        assert flags[str(voted.id)] == (True, 1)
        assert flags[str(other.id)] == (False, 0)

    @pytest.mark.asyncio
    async def test_filters_are_applied(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListSuggestionsUseCase)
        repo = await unit_env.get(SuggestionRepository)
        sabzi = make_dish("Sabzi Chalow", DishCategory.SABZI)
        match = await repo.save(make_suggestion(sabzi, Weekday.THURSDAY))
        await repo.save(make_suggestion(sabzi, Weekday.FRIDAY))

        # Act
        response = await use_case.execute(
            ListSuggestionsRequest(category=DishCategory.SABZI, day=Weekday.THURSDAY)
        )

        # Assert
        assert [s.id for s in response.suggestions] == [str(match.id)]
