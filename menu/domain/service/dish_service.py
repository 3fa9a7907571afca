"""Dish catalog domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from menu.domain.error import StoreError
from menu.domain.model.dish import Dish
from menu.domain.repository import DishRepository
from menu.domain.value import DishCategory, DishId, DishName, UserId

from .base import STORE_FAILURES, Service


class DishService(Service):
    """Domain service for the dish catalog."""

    def __init__(self, dish_repository: DishRepository) -> None:
        """Initialize dish service.

        Args:
            dish_repository: Dish repository
        """
        self.dish_repository = dish_repository

    async def get_dish_by_id(self, dish_id: DishId) -> Dish | None:
        """Get a dish by ID.

        Args:
            dish_id: Dish ID

        Returns:
            Dish if found, None otherwise

        Raises:
            StoreError: If the catalog lookup fails
        """
        with logfire.span("dish_service.get_dish_by_id", dish_id=str(dish_id)):
            try:
                dish = await self.dish_repository.find_by_id(dish_id)
            except STORE_FAILURES as e:
                logfire.error("Dish lookup failed", dish_id=str(dish_id), error=str(e))
                raise StoreError(f"Failed to fetch dish: {e}") from e

            if dish:
                logfire.info("Dish found", dish_id=str(dish_id), name=dish.name.root)
            else:
                logfire.warn("Dish not found", dish_id=str(dish_id))

            return dish

    async def create_inactive_dish(
        self, name: DishName, category: DishCategory, created_by: UserId
    ) -> Dish:
        """Create a user-submitted dish awaiting moderation.

        No deduplication against existing names: two users suggesting the
        same new name get two distinct dishes.

        Args:
            name: Trimmed dish name
            category: Dish category
            created_by: Submitting user

        Returns:
            The stored dish

        Raises:
            StoreError: If the insert fails
        """
        with logfire.span(
            "dish_service.create_inactive_dish",
            name=name.root,
            category=category.value,
            created_by=str(created_by),
        ):
            dish = Dish(
                id=DishId(uuid4()),
                name=name,
                category=category,
                is_active=False,
                created_by=created_by,
                created_at=datetime.now(),
            )

            try:
                saved = await self.dish_repository.save(dish)
            except STORE_FAILURES as e:
                logfire.error("Dish creation failed", name=name.root, error=str(e))
                raise StoreError(f"Failed to create dish: {e}") from e

            logfire.info("Dish created", dish_id=str(saved.id), name=saved.name.root)
            return saved

    async def get_active_dishes(self) -> list[Dish]:
        """Get the active catalog, ordered by name.

        Returns:
            Active dishes

        Raises:
            StoreError: If the catalog query fails
        """
        with logfire.span("dish_service.get_active_dishes"):
            try:
                dishes = await self.dish_repository.find_active()
            except STORE_FAILURES as e:
                logfire.error("Dish listing failed", error=str(e))
                raise StoreError(f"Failed to fetch dishes: {e}") from e

            logfire.info("Active dishes retrieved", count=len(dishes))
            return dishes
