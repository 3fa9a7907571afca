"""Unit tests for SuggestionResolver."""

from uuid import uuid4

import pytest

from menu.domain.error import NotFoundError, ValidationError
from menu.domain.repository import DishRepository
from menu.domain.service import SuggestionResolver
from menu.domain.value import DishCategory, DishId, UserId
from tests.conftest import make_dish
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestResolveExistingDish:
    """Tests for resolving a catalog dish by id."""

    @pytest.mark.asyncio
    async def test_returns_snapshot_of_existing_dish(self, unit_env):
        """Existing dish id should resolve to that dish without creating one."""
        # Arrange
        resolver = await unit_env.get(SuggestionResolver)
        dish_repo = await unit_env.get(DishRepository)
        dish = await dish_repo.save(make_dish("Zereshk Polo"))

        # Act
        ref = await resolver.resolve(
            existing_dish_id=dish.id,
            new_dish_name=None,
            category=DishCategory.RICE,
            actor_id=UserId(uuid4()),
        )

        # Assert
        assert ref.dish_id == dish.id
        assert ref.name.root == "Zereshk Polo"
        assert ref.is_new is False
        assert [d.id for d in await dish_repo.find_active()] == [dish.id]

    @pytest.mark.asyncio
    async def test_unknown_dish_id_raises_not_found(self, unit_env):
        """A dish id with no catalog entry is NotFound."""
        # Arrange
        resolver = await unit_env.get(SuggestionResolver)
        missing_id = DishId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await resolver.resolve(
                existing_dish_id=missing_id,
                new_dish_name=None,
                category=DishCategory.MEAT,
                actor_id=UserId(uuid4()),
            )
        assert exc_info.value.resource == "Dish"
        assert exc_info.value.identifier == str(missing_id)


class TestResolveNewDish:
    """Tests for resolving a new dish name."""

    @pytest.mark.asyncio
    async def test_creates_inactive_dish(self, unit_env):
        """A new name should create an inactive dish owned by the actor."""
        # Arrange
        resolver = await unit_env.get(SuggestionResolver)
        dish_repo = await unit_env.get(DishRepository)
        actor_id = UserId(uuid4())

        # Act
        ref = await resolver.resolve(
            existing_dish_id=None,
            new_dish_name="  Kabuli Pulao  ",
            category=DishCategory.RICE,
            actor_id=actor_id,
        )

        # Assert
        assert ref.is_new is True
        assert ref.name.root == "Kabuli Pulao"

        dish = await dish_repo.find_by_id(ref.dish_id)
        assert dish is not None
        assert dish.is_active is False
        assert dish.created_by == actor_id
        assert dish.category == DishCategory.RICE
        # Not visible in the active catalog until moderated
        assert await dish_repo.find_active() == []

    @pytest.mark.asyncio
    async def test_same_name_twice_creates_two_dishes(self, unit_env):
        """New names are not deduplicated."""
        # Arrange
        resolver = await unit_env.get(SuggestionResolver)

        # Act
        first = await resolver.resolve(None, "Bolani", DishCategory.REGULAR, UserId(uuid4()))
        second = await resolver.resolve(None, "Bolani", DishCategory.REGULAR, UserId(uuid4()))

        # Assert
        assert first.dish_id != second.dish_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    async def test_invalid_name_raises_validation_error(self, unit_env, name):
        """Blank or overlong names are rejected."""
        # Arrange
        resolver = await unit_env.get(SuggestionResolver)

        # Act & Assert
        with pytest.raises(ValidationError):
            await resolver.resolve(None, name, DishCategory.SABZI, UserId(uuid4()))


class TestResolveInputShape:
    """Tests for the exactly-one-of rule."""

    @pytest.mark.asyncio
    async def test_neither_given_raises(self, unit_env):
        resolver = await unit_env.get(SuggestionResolver)

        with pytest.raises(ValidationError):
            await resolver.resolve(None, None, DishCategory.MEAT, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_both_given_raises(self, unit_env):
        resolver = await unit_env.get(SuggestionResolver)

        with pytest.raises(ValidationError):
            await resolver.resolve(
                DishId(uuid4()), "Mantu", DishCategory.REGULAR, UserId(uuid4())
            )
