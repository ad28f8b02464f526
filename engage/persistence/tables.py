"""SQLAlchemy table definitions for the engagement store.

These tables are used with SQLAlchemy Core from the repositories.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (top-level comments and single-level replies)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("anime_id", Integer, nullable=False),  # Catalog reference
    Column("episode_id", Integer, nullable=False),  # Catalog reference
    Column("user_name", String(16), nullable=False),
    Column("user_avatar", String(16), nullable=False, server_default="icon_01"),
    Column("text", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),  # Denormalized
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("is_reply", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
    CheckConstraint("is_reply = (parent_id IS NOT NULL)", name="reply_has_parent"),
    CheckConstraint(
        "char_length(text) BETWEEN 1 AND 600", name="text_length_in_range"
    ),
)

# Page queries: one index per sort order
Index(
    "idx_comments_episode_recent",
    comments_table.c.anime_id,
    comments_table.c.episode_id,
    comments_table.c.is_reply,
    comments_table.c.created_at.desc(),
)
Index(
    "idx_comments_episode_likes",
    comments_table.c.anime_id,
    comments_table.c.episode_id,
    comments_table.c.is_reply,
    comments_table.c.likes.desc(),
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_name", comments_table.c.user_name)

# ============================================================================
# COMMENT LIKES TABLE (like ledger)
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(32), nullable=False),  # Author-name-derived token
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
)

# The unique constraint covers (comment_id, user_id) lookups;
# this one serves batch "which of these did I like" queries per user
Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)

# ============================================================================
# ANIME VIEWS TABLE (all-time totals)
# ============================================================================
anime_views_table = Table(
    "anime_views",
    metadata,
    Column("anime_id", Integer, primary_key=True),  # Catalog reference
    Column("view_count", BigInteger, nullable=False, server_default="0"),
    Column(
        "last_updated",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
)

Index("idx_anime_views_view_count", anime_views_table.c.view_count.desc())

# ============================================================================
# WEEKLY VIEWS TABLE (one row per anime per calendar week)
# ============================================================================
weekly_views_table = Table(
    "weekly_views",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("anime_id", Integer, nullable=False),  # Catalog reference
    Column("view_count", Integer, nullable=False, server_default="1"),
    Column("week_start_date", Date, nullable=False),  # Sunday of the week
    Column(
        "last_updated",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("anime_id", "week_start_date", name="uq_weekly_view"),
)

Index(
    "idx_weekly_views_week_ranking",
    weekly_views_table.c.week_start_date,
    weekly_views_table.c.view_count.desc(),
)
