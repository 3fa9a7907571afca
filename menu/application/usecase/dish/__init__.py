"""Dish use cases."""

from .list_dishes import DishItem, ListDishesRequest, ListDishesResponse, ListDishesUseCase

__all__ = [
    "DishItem",
    "ListDishesRequest",
    "ListDishesResponse",
    "ListDishesUseCase",
]
