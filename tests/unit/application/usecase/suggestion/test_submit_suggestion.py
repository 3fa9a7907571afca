"""Unit tests for SubmitSuggestionUseCase."""

import asyncio
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from menu.application.usecase.suggestion import (
    SubmitSuggestionRequest,
    SubmitSuggestionUseCase,
    SuggestionPayload,
)
from menu.domain.error import NotAuthenticatedError, NotFoundError, StoreError
from menu.domain.repository import DishRepository, SuggestionRepository, UnitOfWork
from menu.domain.service import SuggestionResolver, SuggestionService
from menu.domain.value import DishCategory, DishId, ModerationStatus, Weekday
from tests.conftest import make_dish
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSubmitSuggestionUseCase:
    """Tests for SubmitSuggestionUseCase."""

    @pytest.mark.asyncio
    async def test_new_dish_name_creates_pending_suggestion(self, unit_env):
        """A new dish name creates an inactive dish and a pending suggestion."""
        # Arrange
        use_case = await unit_env.get(SubmitSuggestionUseCase)
        dish_repo = await unit_env.get(DishRepository)
        actor_id = uuid4()

        request = SubmitSuggestionRequest(
            name="Kabuli Pulao",
            category=DishCategory.RICE,
            day=Weekday.WEDNESDAY,
            actor_id=actor_id,
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        suggestion = response.suggestion
        assert suggestion.dish_name == "Kabuli Pulao"
        assert suggestion.status == ModerationStatus.PENDING
        assert suggestion.vote_count == 0
        assert suggestion.suggested_by == str(actor_id)
        assert suggestion.day == Weekday.WEDNESDAY

        dish = await dish_repo.find_by_id(DishId(UUID(suggestion.dish_id)))
        assert dish is not None
        assert dish.is_active is False

    @pytest.mark.asyncio
    async def test_existing_dish_creates_unmoderated_suggestion(self, unit_env):
        """A catalog dish id creates a suggestion without moderation status."""
        # Arrange
        use_case = await unit_env.get(SubmitSuggestionUseCase)
        dish_repo = await unit_env.get(DishRepository)
        dish = await dish_repo.save(make_dish("Chicken Kebab", DishCategory.MEAT))

        request = SubmitSuggestionRequest(
            dish_id=dish.id,
            category=DishCategory.MEAT,
            day=Weekday.FRIDAY,
            actor_id=uuid4(),
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.suggestion.dish_id == str(dish.id)
        assert response.suggestion.dish_name == "Chicken Kebab"
        assert response.suggestion.status is None

    @pytest.mark.asyncio
    async def test_anonymous_actor_is_rejected_before_any_write(self, unit_env):
        """Without an actor nothing is written."""
        # Arrange
        use_case = await unit_env.get(SubmitSuggestionUseCase)
        suggestion_repo = await unit_env.get(SuggestionRepository)

        request = SubmitSuggestionRequest(
            name="Mantu", category=DishCategory.REGULAR, day=Weekday.MONDAY
        )

        # Act & Assert
        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(request)

        assert await suggestion_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_unknown_dish_id_raises_not_found(self, unit_env):
        """An unknown dish id fails without creating a suggestion."""
        # Arrange
        use_case = await unit_env.get(SubmitSuggestionUseCase)
        suggestion_repo = await unit_env.get(SuggestionRepository)

        request = SubmitSuggestionRequest(
            dish_id=uuid4(),
            category=DishCategory.RICE,
            day=Weekday.TUESDAY,
            actor_id=uuid4(),
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(request)

        assert await suggestion_repo.find_all() == []


class TestSuggestionPayload:
    """Tests for payload shape validation."""

    def test_requires_dish_id_or_name(self):
        with pytest.raises(PydanticValidationError):
            SuggestionPayload(category=DishCategory.RICE, day=Weekday.MONDAY)

    def test_rejects_both_dish_id_and_name(self):
        with pytest.raises(PydanticValidationError):
            SuggestionPayload(
                dish_id=uuid4(),
                name="Mantu",
                category=DishCategory.REGULAR,
                day=Weekday.MONDAY,
            )

    @pytest.mark.parametrize("name", ["", "    ", "x" * 101])
    def test_rejects_unusable_name(self, name):
        with pytest.raises(PydanticValidationError):
            SuggestionPayload(name=name, category=DishCategory.RICE, day=Weekday.MONDAY)

    @pytest.mark.parametrize(
        "field,value", [("category", "dessert"), ("day", "saturday")]
    )
    def test_rejects_unknown_enum_values(self, field, value):
        payload = {"name": "Mantu", "category": "regular", "day": "monday"}
        payload[field] = value

        with pytest.raises(PydanticValidationError):
            SuggestionPayload(**payload)


class FailingUnitOfWork(UnitOfWork):
    """Unit of work whose commit times out."""

    async def commit(self) -> None:
        raise asyncio.TimeoutError("commit timed out")


class TestSubmitSuggestionCommit:
    """The suggestion is committed before it is reported as created."""

    @pytest.mark.asyncio
    async def test_successful_submission_is_committed(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitSuggestionUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act
        await use_case.execute(
            SubmitSuggestionRequest(
                name="Kabuli Pulao",
                category=DishCategory.RICE,
                day=Weekday.WEDNESDAY,
                actor_id=uuid4(),
            )
        )

        # Assert
        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_unknown_dish_is_not_committed(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitSuggestionUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                SubmitSuggestionRequest(
                    dish_id=uuid4(),
                    category=DishCategory.RICE,
                    day=Weekday.MONDAY,
                    actor_id=uuid4(),
                )
            )

        assert unit_of_work.commits == 0

    @pytest.mark.asyncio
    async def test_commit_failure_raises_store_error(self, unit_env):
        # Arrange
        use_case = SubmitSuggestionUseCase(
            suggestion_resolver=await unit_env.get(SuggestionResolver),
            suggestion_service=await unit_env.get(SuggestionService),
            unit_of_work=FailingUnitOfWork(),
        )

        # Act & Assert
        with pytest.raises(StoreError, match="Failed to commit suggestion"):
            await use_case.execute(
                SubmitSuggestionRequest(
                    name="Kabuli Pulao",
                    category=DishCategory.RICE,
                    day=Weekday.WEDNESDAY,
                    actor_id=uuid4(),
                )
            )
