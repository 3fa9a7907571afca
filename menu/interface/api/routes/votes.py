"""Vote routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from menu.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from menu.domain.error import (
    AlreadyVotedError,
    NotAuthenticatedError,
    NotFoundError,
    StoreError,
)
from menu.domain.service import JWTService
from menu.interface.api.auth import extract_token

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a suggestion."""

    suggestion_id: UUID


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(extract_token),
) -> CastVoteResponse:
    """Vote on a suggestion.

    Requires authentication. A user can vote once per suggestion.

    Args:
        request: Vote data
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        token: JWT token from Authorization header or cookie

    Returns:
        The suggestion's vote count after the vote

    Raises:
        HTTPException: If not authenticated, already voted, the suggestion
            is unknown, or the store fails
    """
    voter_id = jwt_service.get_user_id_from_token(token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(suggestion_id=request.suggestion_id, voter_id=voter_id)
        )
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except AlreadyVotedError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Already voted on this suggestion",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except StoreError as e:
        logfire.error("Failed to cast vote", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
