"""Meal suggestion routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from menu.application.usecase.suggestion import (
    ListSuggestionsRequest,
    ListSuggestionsResponse,
    ListSuggestionsUseCase,
    SubmitSuggestionRequest,
    SubmitSuggestionResponse,
    SubmitSuggestionUseCase,
    SuggestionPayload,
)
from menu.domain.error import (
    NotAuthenticatedError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from menu.domain.service import JWTService
from menu.domain.value import DishCategory, Weekday
from menu.interface.api.auth import extract_token

router = APIRouter(prefix="/suggestions", tags=["suggestions"], route_class=DishkaRoute)


@router.post(
    "", response_model=SubmitSuggestionResponse, status_code=status.HTTP_201_CREATED
)
async def submit_suggestion(
    request: SuggestionPayload,
    submit_suggestion_use_case: FromDishka[SubmitSuggestionUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(extract_token),
) -> SubmitSuggestionResponse:
    """Suggest a dish for a weekday and category.

    Requires authentication. Send either ``dish_id`` for a catalog dish or
    ``name`` for a new one; a new name creates an inactive dish and a
    suggestion awaiting moderation.

    Args:
        request: Suggestion data
        submit_suggestion_use_case: Submit suggestion use case from DI
        jwt_service: JWT service for token verification (injected)
        token: JWT token from Authorization header or cookie

    Returns:
        Created suggestion

    Raises:
        HTTPException: If not authenticated, the dish is unknown, or the store fails
    """
    user_id = jwt_service.get_user_id_from_token(token)

    try:
        use_case_request = SubmitSuggestionRequest(
            **request.model_dump(), actor_id=user_id
        )
        return await submit_suggestion_use_case.execute(use_case_request)
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except ValidationError as e:
        logfire.warn("Suggestion rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StoreError as e:
        logfire.error("Failed to submit suggestion", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.get("", response_model=ListSuggestionsResponse)
async def list_suggestions(
    list_suggestions_use_case: FromDishka[ListSuggestionsUseCase],
    jwt_service: FromDishka[JWTService],
    category: DishCategory | None = None,
    day: Weekday | None = None,
    token: str | None = Depends(extract_token),
) -> ListSuggestionsResponse:
    """List suggestions, oldest first.

    Public endpoint. When the caller is authenticated each suggestion also
    says whether they already voted on it.

    Args:
        list_suggestions_use_case: List suggestions use case from DI
        jwt_service: JWT service for token verification (injected)
        category: Optional category filter
        day: Optional weekday filter
        token: JWT token from Authorization header or cookie

    Returns:
        Suggestions with their vote counts

    Raises:
        HTTPException: If the store fails
    """
    viewer_id = jwt_service.get_user_id_from_token(token)

    try:
        return await list_suggestions_use_case.execute(
            ListSuggestionsRequest(category=category, day=day, viewer_id=viewer_id)
        )
    except StoreError as e:
        logfire.error("Failed to list suggestions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
