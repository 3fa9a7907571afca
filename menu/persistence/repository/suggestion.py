"""PostgreSQL implementation of Suggestion repository."""

from typing import List, Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from menu.domain.model import Suggestion
from menu.domain.repository import SuggestionRepository
from menu.domain.value import DishCategory, SuggestionId, Weekday
from menu.persistence.mappers import row_to_suggestion, suggestion_to_dict
from menu.persistence.tables import meal_suggestions_table


class PostgresSuggestionRepository(SuggestionRepository):
    """PostgreSQL implementation of SuggestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        stmt = select(meal_suggestions_table).where(
            meal_suggestions_table.c.id == suggestion_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_suggestion(row._asdict()) if row else None

    async def find_by_id_for_update(
        self, suggestion_id: SuggestionId
    ) -> Optional[Suggestion]:
        """Find a suggestion by ID with SELECT ... FOR UPDATE."""
        stmt = (
            select(meal_suggestions_table)
            .where(meal_suggestions_table.c.id == suggestion_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_suggestion(row._asdict()) if row else None

    async def find_all(
        self,
        category: Optional[DishCategory] = None,
        day: Optional[Weekday] = None,
    ) -> List[Suggestion]:
        """Find suggestions ordered by creation time."""
        with logfire.span(
            "suggestion_repository.find_all",
            category=category.value if category else None,
            day=day.value if day else None,
        ):
            stmt = select(meal_suggestions_table)

            if category:
                stmt = stmt.where(meal_suggestions_table.c.category == category.value)
            if day:
                stmt = stmt.where(meal_suggestions_table.c.day == day.value)

            # id breaks ties between identical timestamps
            stmt = stmt.order_by(
                meal_suggestions_table.c.created_at.asc(),
                meal_suggestions_table.c.id.asc(),
            )

            result = await self.session.execute(stmt)
            return [row_to_suggestion(row._asdict()) for row in result.fetchall()]

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Insert a suggestion."""
        stmt = insert(meal_suggestions_table).values(**suggestion_to_dict(suggestion))
        await self.session.execute(stmt)
        await self.session.flush()
        return suggestion

    async def increment_vote_count(self, suggestion_id: SuggestionId) -> Optional[int]:
        """Atomically increment vote_count by 1."""
        stmt = (
            update(meal_suggestions_table)
            .where(meal_suggestions_table.c.id == suggestion_id)
            .values(vote_count=meal_suggestions_table.c.vote_count + 1)
            .returning(meal_suggestions_table.c.vote_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def set_vote_count(
        self, suggestion_id: SuggestionId, vote_count: int
    ) -> Optional[int]:
        """Overwrite vote_count."""
        stmt = (
            update(meal_suggestions_table)
            .where(meal_suggestions_table.c.id == suggestion_id)
            .values(vote_count=vote_count)
            .returning(meal_suggestions_table.c.vote_count)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()
