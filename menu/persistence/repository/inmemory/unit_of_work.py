"""In-memory unit of work for testing."""

from menu.domain.repository import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are applied immediately; commits are only counted."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        """Record a commit."""
        self.commits += 1
