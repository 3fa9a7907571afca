"""Request authentication helpers."""

from fastapi import Cookie, Header

BEARER_PREFIX = "bearer "


def extract_token(
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> str | None:
    """Read the identity provider token from the request.

    The ``Authorization: Bearer`` header wins over the ``auth_token`` cookie.
    Used as a FastAPI dependency.

    Args:
        auth_token: JWT token from cookie
        authorization: Authorization header value

    Returns:
        Raw token string, or None if the request carries no token
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token
