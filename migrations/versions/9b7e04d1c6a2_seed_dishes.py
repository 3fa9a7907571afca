"""seed_dishes

Revision ID: 9b7e04d1c6a2
Revises: 3f1c2a9d7b40
Create Date: 2026-09-14 10:40:51.207734

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "9b7e04d1c6a2"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DISHES = [
    # Regular
    ("Aush", "regular"),
    ("Mantu", "regular"),
    ("Bolani", "regular"),
    ("Lentil Soup", "regular"),
    # Meat
    ("Chicken Kebab", "meat"),
    ("Lamb Karahi", "meat"),
    ("Chapli Kebab", "meat"),
    # Rice
    ("Chalow", "rice"),
    ("Zereshk Polo", "rice"),
    ("Yakhni Pulao", "rice"),
    # Sabzi
    ("Sabzi Chalow", "sabzi"),
    ("Banjan Borani", "sabzi"),
    ("Kadu Borani", "sabzi"),
]


def upgrade() -> None:
    """Seed the active dish catalog."""
    dishes_table = sa.table(
        "dishes",
        sa.column("name", sa.String),
        sa.column("category", postgresql.ENUM(name="dish_category", create_type=False)),
        sa.column("is_active", sa.Boolean),
    )

    op.bulk_insert(
        dishes_table,
        [
            {"name": name, "category": category, "is_active": True}
            for name, category in DISHES
        ],
    )


def downgrade() -> None:
    """Remove seeded dishes that nobody suggested."""
    names = ", ".join(f"'{name}'" for name, _ in DISHES)
    op.execute(
        f"""
        DELETE FROM dishes
        WHERE created_by IS NULL
          AND name IN ({names})
          AND id NOT IN (SELECT dish_id FROM meal_suggestions)
        """
    )
