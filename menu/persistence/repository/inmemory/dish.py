"""In-memory dish repository for testing."""

from typing import Optional

from menu.domain.model.dish import Dish
from menu.domain.repository.dish import DishRepository
from menu.domain.value import DishId


class InMemoryDishRepository(DishRepository):
    """In-memory implementation of DishRepository for testing."""

    def __init__(self) -> None:
        self._dishes: dict[DishId, Dish] = {}

    async def find_by_id(self, dish_id: DishId) -> Optional[Dish]:
        """Find a dish by ID."""
        return self._dishes.get(dish_id)

    async def find_active(self) -> list[Dish]:
        """Find active dishes ordered by name."""
        active = [d for d in self._dishes.values() if d.is_active]
        return sorted(active, key=lambda d: d.name.root)

    async def save(self, dish: Dish) -> Dish:
        """Insert a dish."""
        self._dishes[dish.id] = dish
        return dish
