"""Domain services."""

from .base import Service
from .dish_service import DishService
from .jwt_service import JWTService
from .suggestion_resolver import SuggestionResolver
from .suggestion_service import SuggestionService
from .vote_service import VoteService

__all__ = [
    "DishService",
    "JWTService",
    "Service",
    "SuggestionResolver",
    "SuggestionService",
    "VoteService",
]
