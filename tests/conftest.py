"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

import logfire

from menu.config import AuthSettings
from menu.domain.model import Dish, Suggestion
from menu.domain.value import (
    DishCategory,
    DishId,
    DishName,
    ModerationStatus,
    SuggestionId,
    UserId,
    Weekday,
)
from menu.util.jwt import create_token

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


def make_dish(
    name: str = "Chalow",
    category: DishCategory = DishCategory.RICE,
    is_active: bool = True,
    created_by: UserId | None = None,
) -> Dish:
    """Build a catalog dish for tests (active and seeded by default)."""
    return Dish(
        id=DishId(uuid4()),
        name=DishName(name),
        category=category,
        is_active=is_active,
        created_by=created_by,
        created_at=datetime.now(),
    )


def make_suggestion(
    dish: Dish | None = None,
    day: Weekday = Weekday.MONDAY,
    suggested_by: UserId | None = None,
    status: ModerationStatus | None = None,
    vote_count: int = 0,
    created_at: datetime | None = None,
) -> Suggestion:
    """Build a suggestion for tests."""
    dish = dish or make_dish()
    return Suggestion(
        id=SuggestionId(uuid4()),
        dish_id=dish.id,
        dish_name=dish.name,
        category=dish.category,
        day=day,
        suggested_by=suggested_by or UserId(uuid4()),
        status=status,
        vote_count=vote_count,
        created_at=created_at or datetime.now(),
    )


def make_token(
    user_id: UUID | None = None,
    settings: AuthSettings | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """Mint a token the way the identity provider would."""
    return create_token(
        user_id or uuid4(), settings or AuthSettings(), expires_in=expires_in
    )
