"""Domain value objects for the weekly menu."""

from menu.domain.value.identifiers import (
    DishId,
    SuggestionId,
    UserId,
    VoteId,
)
from menu.domain.value.types import (
    DishCategory,
    DishName,
    DishRef,
    ModerationStatus,
    Weekday,
)

__all__ = [
    # Identifiers
    "UserId",
    "DishId",
    "SuggestionId",
    "VoteId",
    # Types
    "DishCategory",
    "DishName",
    "DishRef",
    "ModerationStatus",
    "Weekday",
]
