"""Dish repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from menu.domain.model.dish import Dish
from menu.domain.value import DishId


class DishRepository(ABC):
    """Repository for the dish catalog.

    Defines the contract for dish persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, dish_id: DishId) -> Optional[Dish]:
        """Find a dish by ID.

        Args:
            dish_id: The dish's unique identifier

        Returns:
            The dish if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(self) -> List[Dish]:
        """Find all active dishes ordered by name ascending.

        Returns:
            Active dishes
        """
        pass

    @abstractmethod
    async def save(self, dish: Dish) -> Dish:
        """Insert a new dish.

        Args:
            dish: The dish to insert

        Returns:
            The stored dish
        """
        pass
