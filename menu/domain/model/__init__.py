"""Domain model entities for the weekly menu."""

from menu.domain.model.dish import Dish
from menu.domain.model.suggestion import Suggestion
from menu.domain.model.vote import Vote

__all__ = [
    "Dish",
    "Suggestion",
    "Vote",
]
