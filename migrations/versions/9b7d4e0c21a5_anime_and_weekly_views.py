"""anime_and_weekly_views

Create the view analytics schema:
- Anime views (all-time counter per catalog entry)
- Weekly views (one counter per catalog entry per Sunday-started week)

Revision ID: 9b7d4e0c21a5
Revises: 3f1c9a2e7b40
Create Date: 2026-09-30 09:47:51.208113

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b7d4e0c21a5"
down_revision: Union[str, Sequence[str], None] = "3f1c9a2e7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "anime_views",
        sa.Column("anime_id", sa.Integer(), nullable=False),
        sa.Column("view_count", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column(
            "last_updated",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("anime_id"),
        sa.CheckConstraint("view_count >= 0", name="view_count_non_negative"),
    )
    op.create_index(
        "idx_anime_views_view_count", "anime_views", [sa.text("view_count DESC")]
    )

    op.create_table(
        "weekly_views",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("anime_id", sa.Integer(), nullable=False),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("week_start_date", sa.Date(), nullable=False),
        sa.Column(
            "last_updated",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        # Target of the ON CONFLICT upsert in the view repository
        sa.UniqueConstraint("anime_id", "week_start_date", name="uq_weekly_view"),
    )
    op.create_index(
        "idx_weekly_views_week_ranking",
        "weekly_views",
        ["week_start_date", sa.text("view_count DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_weekly_views_week_ranking", table_name="weekly_views")
    op.drop_table("weekly_views")

    op.drop_index("idx_anime_views_view_count", table_name="anime_views")
    op.drop_table("anime_views")
