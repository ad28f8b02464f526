"""comments_and_likes

Create the comment schema:
- Comments (top-level comments and single-level replies)
- Comment likes (ledger backing the denormalized likes counter)

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-09-28 18:12:04.512339

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("anime_id", sa.Integer(), nullable=False),
        sa.Column("episode_id", sa.Integer(), nullable=False),
        sa.Column("user_name", sa.String(16), nullable=False),
        sa.Column(
            "user_avatar", sa.String(16), nullable=False, server_default="icon_01"
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("is_reply", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
        sa.CheckConstraint(
            "is_reply = (parent_id IS NOT NULL)", name="reply_has_parent"
        ),
        sa.CheckConstraint(
            "char_length(text) BETWEEN 1 AND 600", name="text_length_in_range"
        ),
    )
    op.create_index(
        "idx_comments_episode_recent",
        "comments",
        ["anime_id", "episode_id", "is_reply", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_comments_episode_likes",
        "comments",
        [
            "anime_id",
            "episode_id",
            "is_reply",
            sa.text("likes DESC"),
            sa.text("created_at DESC"),
        ],
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_user_name", "comments", ["user_name"])

    # ========================================================================
    # COMMENT_LIKES table
    # ========================================================================
    op.create_table(
        "comment_likes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.String(32), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # One like per user per comment; also the race arbiter for likes
        sa.UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
    )
    op.create_index("idx_comment_likes_user_id", "comment_likes", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comment_likes_user_id", table_name="comment_likes")
    op.drop_table("comment_likes")

    op.drop_index("idx_comments_user_name", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_episode_likes", table_name="comments")
    op.drop_index("idx_comments_episode_recent", table_name="comments")
    op.drop_table("comments")
