"""Suggestion resolver domain service.

Turns the dish part of a suggestion request into a canonical dish
reference, creating a catalog entry when the request names a new dish.
"""

import logfire

from menu.domain.error import NotFoundError, ValidationError
from menu.domain.value import DishCategory, DishId, DishName, DishRef, UserId

from .base import Service
from .dish_service import DishService


class SuggestionResolver(Service):
    """Resolves a suggestion request to an existing or new dish."""

    def __init__(self, dish_service: DishService) -> None:
        """Initialize suggestion resolver.

        Args:
            dish_service: Dish catalog domain service
        """
        self.dish_service = dish_service

    async def resolve(
        self,
        existing_dish_id: DishId | None,
        new_dish_name: str | None,
        category: DishCategory,
        actor_id: UserId,
    ) -> DishRef:
        """Resolve to a dish reference.

        Exactly one of ``existing_dish_id`` and ``new_dish_name`` must be
        given. The returned name is a snapshot taken now.

        Args:
            existing_dish_id: ID of a catalog dish
            new_dish_name: Name of a dish to add to the catalog
            category: Category for a newly created dish
            actor_id: User creating the dish, if one is created

        Returns:
            Dish reference; ``is_new`` is True when a dish was created

        Raises:
            ValidationError: If both or neither input is given, or the name is
                empty after trimming
            NotFoundError: If the existing dish doesn't exist
            StoreError: If the catalog lookup or insert fails
        """
        if (existing_dish_id is None) == (new_dish_name is None):
            raise ValidationError("Exactly one of dish_id or name must be provided")

        with logfire.span(
            "suggestion_resolver.resolve",
            dish_id=str(existing_dish_id) if existing_dish_id else None,
            new_dish_name=new_dish_name,
            category=category.value,
        ):
            if existing_dish_id is not None:
                dish = await self.dish_service.get_dish_by_id(existing_dish_id)
                if not dish:
                    raise NotFoundError("Dish", str(existing_dish_id))

                return DishRef(dish_id=dish.id, name=dish.name, is_new=False)

            try:
                name = DishName(new_dish_name)
            except ValueError as e:
                raise ValidationError(f"Invalid dish name: {new_dish_name!r}") from e

            dish = await self.dish_service.create_inactive_dish(
                name=name, category=category, created_by=actor_id
            )
            return DishRef(dish_id=dish.id, name=dish.name, is_new=True)
