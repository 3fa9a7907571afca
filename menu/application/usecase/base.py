"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import logfire
from pydantic import BaseModel

from menu.domain.error import StoreError
from menu.domain.repository import UnitOfWork
from menu.domain.service.base import STORE_FAILURES

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case orchestrating domain services.

    Requests arrive already shape-validated by their pydantic model; use
    cases enforce the rules that need the store or the caller's identity.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass


async def commit(unit_of_work: UnitOfWork, action: str) -> None:
    """Make a use case's writes durable before it reports success.

    Args:
        unit_of_work: Unit of work of the current request
        action: What was written, for the error message

    Raises:
        StoreError: If the commit fails; none of the writes are kept
    """
    try:
        await unit_of_work.commit()
    except STORE_FAILURES as e:
        logfire.error("Commit failed", action=action, error=str(e))
        raise StoreError(f"Failed to commit {action}: {e}") from e
