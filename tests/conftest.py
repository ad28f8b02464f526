"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from engage.domain.model import Comment
from engage.domain.service import CommentService

INTEGRATION_DIR = Path(__file__).parent / "integration"

# A Wednesday; its week starts on Sunday 2026-10-11
WEDNESDAY = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)


def pytest_collection_modifyitems(config, items):
    """Skip PostgreSQL-backed tests unless ENGAGE_INTEGRATION=1."""
    if os.environ.get("ENGAGE_INTEGRATION") == "1":
        return

    skip = pytest.mark.skip(reason="set ENGAGE_INTEGRATION=1 to run against PostgreSQL")
    for item in items:
        if INTEGRATION_DIR in Path(str(item.fspath)).parents:
            item.add_marker(skip)


async def post_comment(
    service: CommentService,
    text: str = "Great episode!",
    user_name: str = "alice",
    anime_id: int = 1,
    episode_id: int = 101,
) -> Comment:
    """Helper to post a top-level comment with sensible defaults."""
    return await service.add_comment(
        anime_id=anime_id,
        episode_id=episode_id,
        user_name=user_name,
        user_avatar=None,
        text=text,
    )
