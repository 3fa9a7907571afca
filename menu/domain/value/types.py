"""Domain value objects for the weekly menu.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from menu.domain.value.common import RootValueObject, ValueObject
from menu.domain.value.identifiers import DishId

DISH_NAME_MAX_LENGTH = 100


class DishCategory(str, Enum):
    """Menu section a dish belongs to."""

    REGULAR = "regular"
    MEAT = "meat"
    RICE = "rice"
    SABZI = "sabzi"


class Weekday(str, Enum):
    """Days the menu is served (weekdays only)."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"


class ModerationStatus(str, Enum):
    """Moderation state of a suggestion that introduced a new dish.

    Transitions pending -> approved/rejected happen outside this service.
    Suggestions for catalog dishes carry no status at all.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class DishName(RootValueObject[str]):
    """Dish name, trimmed, 1-100 characters."""

    @field_validator("root", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        """Validate name is non-empty and within length limits."""
        if not v:
            raise ValueError("Dish name must not be empty")
        if len(v) > DISH_NAME_MAX_LENGTH:
            raise ValueError(
                f"Dish name must be at most {DISH_NAME_MAX_LENGTH} characters"
            )
        return v


class DishRef(ValueObject):
    """Canonical dish reference produced by the suggestion resolver.

    ``name`` is a snapshot taken at resolution time; later renames of the
    dish do not reach suggestions already created from it.
    """

    dish_id: DishId
    name: DishName
    is_new: bool = False
