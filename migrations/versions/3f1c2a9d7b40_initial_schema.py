"""initial_schema

Create the schema for the weekly menu:
- Dishes (catalog; suggested dishes start inactive)
- Meal suggestions (dish proposed for a weekday and category)
- Votes (one per user per suggestion)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-09-14 10:12:03.518220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid()
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE dish_category AS ENUM ('regular', 'meat', 'rice', 'sabzi');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE weekday AS ENUM (
                'monday', 'tuesday', 'wednesday', 'thursday', 'friday'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE suggestion_status AS ENUM ('pending', 'approved', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # DISHES TABLE
    # ========================================================================
    op.create_table(
        "dishes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(name="dish_category", create_type=False),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("created_by", sa.UUID(), nullable=True),  # NULL when seeded
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(btrim(name)) > 0", name="dish_name_not_blank"),
    )
    op.create_index("idx_dishes_active_name", "dishes", ["is_active", "name"])

    # ========================================================================
    # MEAL_SUGGESTIONS TABLE
    # ========================================================================
    op.create_table(
        "meal_suggestions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("dish_id", sa.UUID(), nullable=False),
        sa.Column("dish_name", sa.String(100), nullable=False),
        sa.Column(
            "category",
            postgresql.ENUM(name="dish_category", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "day",
            postgresql.ENUM(name="weekday", create_type=False),
            nullable=False,
        ),
        sa.Column("suggested_by", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(name="suggestion_status", create_type=False),
            nullable=True,  # NULL for catalog dishes
        ),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("reviewed_by", sa.UUID(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["dish_id"], ["dishes.id"], ondelete="RESTRICT"),
        sa.CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
    )
    op.create_index(
        "idx_meal_suggestions_created_at", "meal_suggestions", ["created_at"]
    )
    op.create_index(
        "idx_meal_suggestions_category_day", "meal_suggestions", ["category", "day"]
    )

    # ========================================================================
    # VOTES TABLE
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("suggestion_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["suggestion_id"], ["meal_suggestions.id"], ondelete="CASCADE"
        ),
        # One vote per user per suggestion
        sa.UniqueConstraint(
            "suggestion_id", "voter_id", name="uq_vote_suggestion_voter"
        ),
    )
    op.create_index("idx_votes_voter_id", "votes", ["voter_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter_id", table_name="votes")
    op.drop_table("votes")

    op.drop_index("idx_meal_suggestions_category_day", table_name="meal_suggestions")
    op.drop_index("idx_meal_suggestions_created_at", table_name="meal_suggestions")
    op.drop_table("meal_suggestions")

    op.drop_index("idx_dishes_active_name", table_name="dishes")
    op.drop_table("dishes")

    op.execute("DROP TYPE IF EXISTS suggestion_status")
    op.execute("DROP TYPE IF EXISTS weekday")
    op.execute("DROP TYPE IF EXISTS dish_category")
