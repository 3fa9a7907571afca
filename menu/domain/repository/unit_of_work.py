"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Makes the current request's writes durable.

    Repositories only stage changes. Nothing is kept unless a use case
    commits; whatever is left uncommitted when the request ends is
    rolled back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit all staged writes.

        Raises:
            Store-specific errors if the commit fails; the writes are then lost
        """
        pass
