"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from engage.domain.error import NotFoundError, ValidationError
from engage.domain.repository import CommentRepository, LikeRepository
from engage.domain.service import CommentService, LikeService
from engage.domain.value import AnimeId, CommentId, EpisodeId, LikerId
from engage.persistence.repository.inmemory import InMemoryDatabase, InMemoryLikeRepository
from tests.conftest import post_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def likes_of(comment_service: CommentService, comment_id: CommentId) -> int:
    comment = await comment_service.get_comment_by_id(comment_id)
    assert comment is not None
    return comment.likes


class TestLikeComment:
    """Tests for like_comment."""

    @pytest.mark.asyncio
    async def test_first_like_is_recorded(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment = await post_comment(comment_service)

        # Act
        liked = await like_service.like_comment(comment.id, "alice")

        # Assert
        assert liked is True
        assert await likes_of(comment_service, comment.id) == 1
        assert await like_service.has_user_liked_comment(comment.id, "alice") is True

    @pytest.mark.asyncio
    async def test_second_like_by_same_user_changes_nothing(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment = await post_comment(comment_service)
        await like_service.like_comment(comment.id, "alice")

        liked_again = await like_service.like_comment(comment.id, "alice")

        assert liked_again is False
        assert await likes_of(comment_service, comment.id) == 1

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment = await post_comment(comment_service)

        for user in ["alice", "bob", "carol"]:
            assert await like_service.like_comment(comment.id, user) is True

        assert await likes_of(comment_service, comment.id) == 3

    @pytest.mark.asyncio
    async def test_like_missing_comment_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.like_comment(CommentId(uuid4()), "alice")

    @pytest.mark.asyncio
    async def test_rejects_overlong_user_id(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment = await post_comment(comment_service)

        with pytest.raises(ValidationError):
            await like_service.like_comment(comment.id, "x" * 33)

        assert await likes_of(comment_service, comment.id) == 0


class TestUnlikeComment:
    """Tests for unlike_comment."""

    @pytest.mark.asyncio
    async def test_like_unlike_sequence(self, unit_env):
        """like, like, unlike, unlike reports True, False, True, False."""
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment = await post_comment(comment_service)

        outcomes = [
            await like_service.like_comment(comment.id, "alice"),
            await like_service.like_comment(comment.id, "alice"),
            await like_service.unlike_comment(comment.id, "alice"),
            await like_service.unlike_comment(comment.id, "alice"),
        ]

        assert outcomes == [True, False, True, False]
        assert await likes_of(comment_service, comment.id) == 0
        assert await like_service.has_user_liked_comment(comment.id, "alice") is False

    @pytest.mark.asyncio
    async def test_unlike_without_like_keeps_counter_at_zero(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment = await post_comment(comment_service)

        assert await like_service.unlike_comment(comment.id, "bob") is False
        assert await likes_of(comment_service, comment.id) == 0

    @pytest.mark.asyncio
    async def test_unlike_missing_comment_raises_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)

        with pytest.raises(NotFoundError):
            await like_service.unlike_comment(CommentId(uuid4()), "alice")


class TestCounterMatchesLedger:
    """The denormalized counter always equals the ledger row count."""

    @pytest.mark.asyncio
    async def test_counter_tracks_mixed_operations(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        comment = await post_comment(comment_service)

        operations = [
            ("like", "alice"),
            ("like", "bob"),
            ("like", "alice"),
            ("unlike", "carol"),
            ("unlike", "bob"),
            ("like", "carol"),
            ("like", "bob"),
            ("unlike", "alice"),
        ]
        for operation, user in operations:
            if operation == "like":
                await like_service.like_comment(comment.id, user)
            else:
                await like_service.unlike_comment(comment.id, user)

            assert await likes_of(
                comment_service, comment.id
            ) == await like_repo.count_by_comment(comment.id)

        assert await like_repo.count_by_comment(comment.id) == 2


class TestGetLikedCommentIds:
    """Tests for the batched liked-status lookup."""

    @pytest.mark.asyncio
    async def test_returns_only_liked_subset(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        first = await post_comment(comment_service)
        second = await post_comment(comment_service)
        third = await post_comment(comment_service)
        await like_service.like_comment(first.id, "alice")
        await like_service.like_comment(third.id, "alice")
        await like_service.like_comment(second.id, "bob")

        liked = await like_service.get_liked_comment_ids(
            "alice", [first.id, second.id, third.id]
        )

        assert liked == {first.id, third.id}

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        like_service = await unit_env.get(LikeService)

        assert await like_service.get_liked_comment_ids("alice", []) == set()

    @pytest.mark.asyncio
    async def test_likes_on_replies_are_visible(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        parent = await post_comment(comment_service)
        reply = await comment_service.add_reply(
            parent.id, AnimeId(1), EpisodeId(101), "bob", None, "Same here"
        )

        await like_service.like_comment(reply.id, "alice")

        assert await like_service.get_liked_comment_ids("alice", [reply.id]) == {
            reply.id
        }


class StaleReadLikeRepository(InMemoryLikeRepository):
    """Ledger whose existence check never sees a concurrent like.

    Reproduces two requests that both pass the check before either has
    inserted its row, so the unique constraint decides on insert.
    """

    async def exists(self, comment_id: CommentId, user_id: LikerId) -> bool:
        return False


class TestConcurrentDuplicateLike:
    """Tests for a like that loses the race on the unique constraint."""

    @pytest.mark.asyncio
    async def test_losing_insert_reports_false_and_keeps_counter(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comments = await unit_env.get(CommentRepository)
        db = await unit_env.get(InMemoryDatabase)
        like_service = LikeService(StaleReadLikeRepository(db), comments)
        comment = await post_comment(comment_service)

        # Act
        first = await like_service.like_comment(comment.id, "alice")
        second = await like_service.like_comment(comment.id, "alice")

        # Assert
        assert (first, second) == (True, False)
        assert await likes_of(comment_service, comment.id) == 1
        assert len([like for like in db.likes if like.comment_id == comment.id]) == 1
