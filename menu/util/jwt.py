"""JWT token utilities.

Tokens are issued by the external identity provider. ``create_token`` exists
for development and tests; production tokens never come from here.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel

from menu.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: UUID  # Actor id assigned by the identity provider
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: UUID | str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """Create a signed token shaped like the identity provider's.

    Args:
        user_id: Actor id placed in the ``sub`` claim
        settings: Authentication settings
        email: Optional email claim
        expires_in: Token lifetime (defaults to settings.dev_token_expiry_hours)

    Returns:
        Encoded JWT token
    """
    lifetime = expires_in or timedelta(hours=settings.dev_token_expiry_hours)

    payload: dict = {
        "sub": str(user_id),
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    if email:
        payload["email"] = email
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or its subject is not a UUID
    """
    options = {"require": ["sub", "exp"]}
    if not settings.jwt_audience:
        options["verify_aud"] = False

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**payload)
    except ValueError:
        raise JWTError("Invalid token subject")
