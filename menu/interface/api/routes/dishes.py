"""Dish catalog routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from menu.application.usecase.dish import (
    ListDishesRequest,
    ListDishesResponse,
    ListDishesUseCase,
)
from menu.domain.error import StoreError

router = APIRouter(prefix="/dishes", tags=["dishes"], route_class=DishkaRoute)


@router.get("", response_model=ListDishesResponse)
async def list_dishes(
    list_dishes_use_case: FromDishka[ListDishesUseCase],
) -> ListDishesResponse:
    """List active catalog dishes, ordered by name.

    Public endpoint, no authentication required. Dishes created through
    suggestions stay hidden until an administrator activates them.

    Args:
        list_dishes_use_case: List dishes use case from DI

    Returns:
        Active dishes

    Raises:
        HTTPException: If the catalog cannot be read
    """
    try:
        return await list_dishes_use_case.execute(ListDishesRequest())
    except StoreError as e:
        logfire.error("Failed to list dishes", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
