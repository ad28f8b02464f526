"""Get comments use case."""

from pydantic import BaseModel

from engage.domain.repository import CommentSortOrder
from engage.domain.service import CommentService, LikeService
from engage.domain.value import AnimeId, EpisodeId

from .items import CommentItem


class ThreadedCommentItem(CommentItem):
    """Top-level comment with its replies."""

    replies: list[CommentItem]
    has_liked: bool | None = None


class PaginationInfo(BaseModel):
    """Pagination block of a comment page."""

    page: int
    limit: int
    total_count: int
    total_pages: int
    has_more: bool


class GetCommentsRequest(BaseModel):
    """Get comments request.

    ``page`` and ``limit`` are expected to be normalized already.
    """

    anime_id: int
    episode_id: int
    page: int = 1
    limit: int = 10
    sort: CommentSortOrder = CommentSortOrder.RECENT
    user_id: str | None = None  # Liker token, to report like state


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[ThreadedCommentItem]
    pagination: PaginationInfo


class GetCommentsUseCase:
    """Use case for reading one page of an episode's comment threads."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            like_service: Like service for checking the caller's likes
        """
        self.comment_service = comment_service
        self.like_service = like_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request

        Returns:
            Page of threads with pagination info, and like state of the
            top-level comments when a user ID was given
        """
        page = await self.comment_service.get_comments_by_episode(
            anime_id=AnimeId(request.anime_id),
            episode_id=EpisodeId(request.episode_id),
            page=request.page,
            limit=request.limit,
            sort_order=request.sort,
        )

        liked = None
        if request.user_id and page.comments:
            # Batch query for the whole page
            liked = await self.like_service.get_liked_comment_ids(
                request.user_id, [c.id for c in page.comments]
            )

        items = [
            ThreadedCommentItem(
                **CommentItem.from_comment(comment).model_dump(),
                replies=[CommentItem.from_comment(r) for r in comment.replies],
                has_liked=comment.id in liked if liked is not None else None,
            )
            for comment in page.comments
        ]

        return GetCommentsResponse(
            comments=items,
            pagination=PaginationInfo(
                page=page.page,
                limit=page.limit,
                total_count=page.total_count,
                total_pages=page.total_pages,
                has_more=page.has_more,
            ),
        )
