"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from menu.domain.model import Vote
from menu.domain.repository import VoteRepository
from menu.domain.value import SuggestionId, UserId
from menu.persistence.mappers import row_to_vote, vote_to_dict
from menu.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_suggestion_and_voter(
        self, suggestion_id: SuggestionId, voter_id: UserId
    ) -> Optional[Vote]:
        """Find a voter's vote on a suggestion."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.suggestion_id == suggestion_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_suggestion(self, suggestion_id: SuggestionId) -> List[Vote]:
        """Find all votes on a suggestion."""
        stmt = select(votes_table).where(votes_table.c.suggestion_id == suggestion_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs inside a SAVEPOINT so a unique violation only rolls back this
        insert and leaves the request transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.suggestion_id == suggestion_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_voter_and_suggestions(
        self, voter_id: UserId, suggestion_ids: Sequence[SuggestionId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple suggestions (batch query)."""
        if not suggestion_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.suggestion_id.in_(suggestion_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
