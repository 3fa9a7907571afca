"""Base service class for domain services."""

import asyncio

from sqlalchemy.exc import SQLAlchemyError

# Store failures (including timeouts) that services surface as StoreError
STORE_FAILURES = (SQLAlchemyError, asyncio.TimeoutError, OSError)


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass
