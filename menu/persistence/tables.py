"""SQLAlchemy table definitions for the weekly menu.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

DISH_CATEGORY = Enum(
    "regular", "meat", "rice", "sabzi", name="dish_category", create_type=False
)
WEEKDAY = Enum(
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    name="weekday",
    create_type=False,
)
SUGGESTION_STATUS = Enum(
    "pending", "approved", "rejected", name="suggestion_status", create_type=False
)

# ============================================================================
# DISHES TABLE (catalog)
# ============================================================================
dishes_table = Table(
    "dishes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(100), nullable=False),
    Column("category", DISH_CATEGORY, nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="false"),
    Column("created_by", UUID, nullable=True),  # NULL for seeded dishes
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(btrim(name)) > 0", name="dish_name_not_blank"),
)

Index("idx_dishes_active_name", dishes_table.c.is_active, dishes_table.c.name)

# ============================================================================
# MEAL_SUGGESTIONS TABLE
# ============================================================================
meal_suggestions_table = Table(
    "meal_suggestions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "dish_id", UUID, ForeignKey("dishes.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("dish_name", String(100), nullable=False),  # Snapshot at creation
    Column("category", DISH_CATEGORY, nullable=False),
    Column("day", WEEKDAY, nullable=False),
    Column("suggested_by", UUID, nullable=False),
    Column("status", SUGGESTION_STATUS, nullable=True),  # NULL for catalog dishes
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("reviewed_by", UUID, nullable=True),
    CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
)

Index("idx_meal_suggestions_created_at", meal_suggestions_table.c.created_at)
Index(
    "idx_meal_suggestions_category_day",
    meal_suggestions_table.c.category,
    meal_suggestions_table.c.day,
)

# ============================================================================
# VOTES TABLE (ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "suggestion_id",
        UUID,
        ForeignKey("meal_suggestions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("suggestion_id", "voter_id", name="uq_vote_suggestion_voter"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)
