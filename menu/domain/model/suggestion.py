"""Suggestion aggregate root.

A suggestion proposes serving a dish on a given weekday in a given category
and carries the denormalized vote tally.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from menu.domain.model.common import DomainModel
from menu.domain.value import (
    DishCategory,
    DishId,
    DishName,
    ModerationStatus,
    SuggestionId,
    UserId,
    Weekday,
)


class Suggestion(DomainModel):
    """Suggestion aggregate root.

    Business rules:
    - dish_id points to an existing dish; dish_name is a snapshot
    - vote_count mirrors the number of ledger entries and only changes
      through the vote ledger's atomic increment
    - status is pending for new dishes, None for catalog dishes
    - created_at is the ordering key and never changes
    """

    id: SuggestionId
    dish_id: DishId
    dish_name: DishName
    category: DishCategory
    day: Weekday
    suggested_by: UserId
    status: Optional[ModerationStatus] = None
    vote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    # Written by the external moderation workflow
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[UserId] = None

    @property
    def requires_moderation(self) -> bool:
        """Whether this suggestion is still awaiting a moderation decision."""
        return self.status == ModerationStatus.PENDING

    @property
    def is_visible_as_approved(self) -> bool:
        """Catalog-dish suggestions count as approved for display."""
        return self.status in (None, ModerationStatus.APPROVED)
