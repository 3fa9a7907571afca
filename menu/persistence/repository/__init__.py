"""PostgreSQL repository implementations."""

from menu.persistence.repository.dish import PostgresDishRepository
from menu.persistence.repository.suggestion import PostgresSuggestionRepository
from menu.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresDishRepository",
    "PostgresSuggestionRepository",
    "PostgresVoteRepository",
]
