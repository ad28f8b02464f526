"""Add comment use case."""

from pydantic import BaseModel

from engage.domain.service import CommentService
from engage.domain.value import AnimeId, EpisodeId

from .items import CommentItem


class AddCommentRequest(BaseModel):
    """Add comment request."""

    anime_id: int
    episode_id: int
    user_name: str
    user_avatar: str | None = None
    text: str


class AddCommentUseCase:
    """Use case for posting a top-level comment on an episode."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If the name, avatar or text is malformed
        """
        comment = await self.comment_service.add_comment(
            anime_id=AnimeId(request.anime_id),
            episode_id=EpisodeId(request.episode_id),
            user_name=request.user_name,
            user_avatar=request.user_avatar,
            text=request.text,
        )
        return CommentItem.from_comment(comment)
