"""Unit tests for DishService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from menu.domain.error import StoreError
from menu.domain.repository import DishRepository
from menu.domain.service import DishService
from menu.domain.value import DishCategory, DishId, DishName, UserId
from menu.persistence.repository.inmemory import InMemoryDishRepository
from tests.conftest import make_dish
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class UnavailableDishRepository(InMemoryDishRepository):
    """Dish store that cannot be reached."""

    async def find_by_id(self, dish_id):
        raise OperationalError("SELECT", {}, ConnectionRefusedError("db down"))

    async def save(self, dish):
        raise OperationalError("INSERT", {}, ConnectionRefusedError("db down"))


class TestGetActiveDishes:
    """Tests for get_active_dishes method."""

    @pytest.mark.asyncio
    async def test_only_active_sorted_by_name(self, unit_env):
        """Inactive dishes are hidden and the rest sorted by name."""
        # Arrange
        service = await unit_env.get(DishService)
        repo = await unit_env.get(DishRepository)
        await repo.save(make_dish("Zereshk Polo"))
        await repo.save(make_dish("Aush", DishCategory.REGULAR))
        await repo.save(make_dish("Kabuli Pulao", is_active=False))

        # Act
        dishes = await service.get_active_dishes()

        # Assert
        assert [d.name.root for d in dishes] == ["Aush", "Zereshk Polo"]


class TestCreateInactiveDish:
    """Tests for create_inactive_dish method."""

    @pytest.mark.asyncio
    async def test_creates_inactive_dish(self, unit_env):
        # Arrange
        service = await unit_env.get(DishService)
        actor = UserId(uuid4())

        # Act
        dish = await service.create_inactive_dish(
            DishName("Qabili"), DishCategory.RICE, actor
        )

        # Assert
        assert dish.is_active is False
        assert dish.created_by == actor
        assert await service.get_dish_by_id(dish.id) == dish


class TestStoreFailures:
    """Store failures are reported as StoreError with context."""

    @pytest.mark.asyncio
    async def test_lookup_failure(self):
        service = DishService(dish_repository=UnavailableDishRepository())

        with pytest.raises(StoreError, match="Failed to fetch dish"):
            await service.get_dish_by_id(DishId(uuid4()))

    @pytest.mark.asyncio
    async def test_insert_failure(self):
        service = DishService(dish_repository=UnavailableDishRepository())

        with pytest.raises(StoreError, match="Failed to create dish"):
            await service.create_inactive_dish(
                DishName("Mantu"), DishCategory.REGULAR, UserId(uuid4())
            )
