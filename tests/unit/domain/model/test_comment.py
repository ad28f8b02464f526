"""Unit tests for the Comment model."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from engage.domain.model import Comment, CommentPage, ThreadedComment
from engage.domain.value import AnimeId, CommentId, EpisodeId, UserName


def make_comment(**overrides) -> Comment:
    fields = dict(
        id=CommentId(uuid4()),
        anime_id=AnimeId(1),
        episode_id=EpisodeId(101),
        user_name=UserName("alice"),
        text="Nice",
    )
    fields.update(overrides)
    return Comment(**fields)


class TestCommentShape:
    """Tests for the reply invariants."""

    def test_top_level_defaults(self):
        comment = make_comment()
        assert comment.likes == 0
        assert comment.parent_id is None
        assert comment.is_reply is False

    def test_reply_requires_parent(self):
        with pytest.raises(ValidationError, match="is_reply"):
            make_comment(is_reply=True)

    def test_parent_requires_reply_flag(self):
        with pytest.raises(ValidationError, match="is_reply"):
            make_comment(parent_id=CommentId(uuid4()))

    def test_likes_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            make_comment(likes=-1)


class TestCommentPage:
    """Tests for the pagination properties."""

    def _page(self, total: int, page: int, limit: int) -> CommentPage:
        return CommentPage(comments=[], total_count=total, page=page, limit=limit)

    def test_total_pages_rounds_up(self):
        assert self._page(total=25, page=1, limit=10).total_pages == 3

    def test_has_more_until_last_page(self):
        assert self._page(total=25, page=2, limit=10).has_more is True
        assert self._page(total=25, page=3, limit=10).has_more is False

    def test_empty_episode(self):
        page = self._page(total=0, page=1, limit=10)
        assert page.total_pages == 0
        assert page.has_more is False

    def test_threaded_comment_starts_without_replies(self):
        threaded = ThreadedComment(**make_comment().model_dump())
        assert threaded.replies == []
