"""SQLAlchemy implementation of the unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from menu.domain.repository import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request's session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the request transaction."""
        await self.session.commit()
        logfire.debug("Session committed")
