"""Dish entity.

A dish is a catalog entry, independent of any day. Seeded dishes are active;
dishes first mentioned in a suggestion start inactive until moderated.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from menu.domain.model.common import DomainModel
from menu.domain.value import DishCategory, DishId, DishName, UserId


class Dish(DomainModel):
    """Dish catalog entry."""

    id: DishId
    name: DishName
    category: DishCategory
    is_active: bool = False
    created_by: Optional[UserId] = None  # None for seeded dishes
    created_at: datetime = Field(default_factory=datetime.now)
