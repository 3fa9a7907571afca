"""PostgreSQL implementation of Dish repository."""

from typing import List, Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from menu.domain.model import Dish
from menu.domain.repository import DishRepository
from menu.domain.value import DishId
from menu.persistence.mappers import dish_to_dict, row_to_dish
from menu.persistence.tables import dishes_table


class PostgresDishRepository(DishRepository):
    """PostgreSQL implementation of DishRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, dish_id: DishId) -> Optional[Dish]:
        """Find a dish by ID."""
        stmt = select(dishes_table).where(dishes_table.c.id == dish_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_dish(row._asdict()) if row else None

    async def find_active(self) -> List[Dish]:
        """Find active dishes ordered by name."""
        with logfire.span("dish_repository.find_active"):
            stmt = (
                select(dishes_table)
                .where(dishes_table.c.is_active.is_(True))
                .order_by(dishes_table.c.name.asc())
            )
            result = await self.session.execute(stmt)
            return [row_to_dish(row._asdict()) for row in result.fetchall()]

    async def save(self, dish: Dish) -> Dish:
        """Insert a dish."""
        stmt = insert(dishes_table).values(**dish_to_dict(dish))
        await self.session.execute(stmt)
        await self.session.flush()
        return dish
