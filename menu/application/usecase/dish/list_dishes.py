"""List dishes use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from menu.application.usecase.base import BaseUseCase
from menu.domain.service import DishService
from menu.domain.value import DishCategory


class DishItem(BaseModel):
    """Dish item in response."""

    id: str
    name: str
    category: DishCategory
    is_active: bool
    created_at: datetime


class ListDishesRequest(BaseModel):
    """List dishes request (no parameters yet)."""

    pass


class ListDishesResponse(BaseModel):
    """List dishes response."""

    dishes: list[DishItem]


class ListDishesUseCase(BaseUseCase[ListDishesRequest, ListDishesResponse]):
    """Use case for listing the active dish catalog."""

    def __init__(self, dish_service: DishService) -> None:
        """Initialize list dishes use case.

        Args:
            dish_service: Dish domain service
        """
        self.dish_service = dish_service

    async def execute(self, request: ListDishesRequest) -> ListDishesResponse:
        """Execute list dishes flow.

        Args:
            request: List dishes request

        Returns:
            Active dishes ordered by name
        """
        with logfire.span("list_dishes.execute"):
            dishes = await self.dish_service.get_active_dishes()

            return ListDishesResponse(
                dishes=[
                    DishItem(
                        id=str(dish.id),
                        name=dish.name.root,
                        category=dish.category,
                        is_active=dish.is_active,
                        created_at=dish.created_at,
                    )
                    for dish in dishes
                ]
            )
