"""In-memory repository implementations for testing."""

from .dish import InMemoryDishRepository
from .suggestion import InMemorySuggestionRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDishRepository",
    "InMemorySuggestionRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
