#!/usr/bin/env python3
"""Mint a development token, signed like the identity provider's.

Usage:
    python scripts/create_token.py                 # random user id
    python scripts/create_token.py <user-uuid> [email]

Send the printed token as ``Authorization: Bearer <token>`` or as the
``auth_token`` cookie.
"""

import sys
from uuid import UUID, uuid4

from menu.config import Settings
from menu.util.error import ConfigurationError
from menu.util.jwt import create_token


def main() -> int:
    """Print a token for the given (or a random) user id."""
    settings = Settings()

    if settings.environment == "production":
        raise ConfigurationError("Refusing to mint tokens in production")

    user_id = UUID(sys.argv[1]) if len(sys.argv) > 1 else uuid4()
    email = sys.argv[2] if len(sys.argv) > 2 else None

    token = create_token(user_id, settings.auth, email=email)

    print(f"user_id: {user_id}", file=sys.stderr)
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
