"""Suggestion use cases."""

from .list_suggestions import (
    ListedSuggestionItem,
    ListSuggestionsRequest,
    ListSuggestionsResponse,
    ListSuggestionsUseCase,
)
from .submit_suggestion import (
    SubmitSuggestionRequest,
    SubmitSuggestionResponse,
    SubmitSuggestionUseCase,
    SuggestionItem,
    SuggestionPayload,
)

__all__ = [
    "ListedSuggestionItem",
    "ListSuggestionsRequest",
    "ListSuggestionsResponse",
    "ListSuggestionsUseCase",
    "SubmitSuggestionRequest",
    "SubmitSuggestionResponse",
    "SubmitSuggestionUseCase",
    "SuggestionItem",
    "SuggestionPayload",
]
