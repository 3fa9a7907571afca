"""Repository interfaces for the weekly menu domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from menu.domain.repository.dish import DishRepository
from menu.domain.repository.suggestion import SuggestionRepository
from menu.domain.repository.unit_of_work import UnitOfWork
from menu.domain.repository.vote import VoteRepository

__all__ = [
    "DishRepository",
    "SuggestionRepository",
    "UnitOfWork",
    "VoteRepository",
]
