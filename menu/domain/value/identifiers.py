"""Strongly typed identifiers for menu domain entities.

Using NewType keeps dish, suggestion and user ids from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
DishId = NewType("DishId", UUID)
SuggestionId = NewType("SuggestionId", UUID)
VoteId = NewType("VoteId", UUID)
