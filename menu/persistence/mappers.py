"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from menu.domain.model import Dish, Suggestion, Vote
from menu.domain.value import (
    DishCategory,
    DishId,
    DishName,
    ModerationStatus,
    SuggestionId,
    UserId,
    VoteId,
    Weekday,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _uuid(value)


def row_to_dish(row: Dict[str, Any]) -> Dish:
    """Convert database row to Dish domain model.

    Args:
        row: Database row as dict

    Returns:
        Dish domain model
    """
    created_by = _optional_uuid(row.get("created_by"))
    return Dish(
        id=DishId(_uuid(row["id"])),
        name=DishName(row["name"]),
        category=DishCategory(row["category"]),
        is_active=row["is_active"],
        created_by=UserId(created_by) if created_by else None,
        created_at=row["created_at"],
    )


def dish_to_dict(dish: Dish) -> Dict[str, Any]:
    """Convert Dish domain model to database dict.

    Args:
        dish: Dish domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": dish.id,
        "name": dish.name.root,
        "category": dish.category.value,
        "is_active": dish.is_active,
        "created_by": dish.created_by,
        "created_at": dish.created_at,
    }


def row_to_suggestion(row: Dict[str, Any]) -> Suggestion:
    """Convert database row to Suggestion domain model.

    Args:
        row: Database row as dict

    Returns:
        Suggestion domain model
    """
    reviewed_by = _optional_uuid(row.get("reviewed_by"))
    return Suggestion(
        id=SuggestionId(_uuid(row["id"])),
        dish_id=DishId(_uuid(row["dish_id"])),
        dish_name=DishName(row["dish_name"]),
        category=DishCategory(row["category"]),
        day=Weekday(row["day"]),
        suggested_by=UserId(_uuid(row["suggested_by"])),
        status=ModerationStatus(row["status"]) if row.get("status") else None,
        vote_count=row["vote_count"],
        created_at=row["created_at"],
        reviewed_at=row.get("reviewed_at"),
        reviewed_by=UserId(reviewed_by) if reviewed_by else None,
    )


def suggestion_to_dict(suggestion: Suggestion) -> Dict[str, Any]:
    """Convert Suggestion domain model to database dict.

    Args:
        suggestion: Suggestion domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": suggestion.id,
        "dish_id": suggestion.dish_id,
        "dish_name": suggestion.dish_name.root,
        "category": suggestion.category.value,
        "day": suggestion.day.value,
        "suggested_by": suggestion.suggested_by,
        "status": suggestion.status.value if suggestion.status else None,
        "vote_count": suggestion.vote_count,
        "created_at": suggestion.created_at,
        "reviewed_at": suggestion.reviewed_at,
        "reviewed_by": suggestion.reviewed_by,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        suggestion_id=SuggestionId(_uuid(row["suggestion_id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return vote.model_dump()
