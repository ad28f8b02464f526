"""Add reply use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.domain.service import CommentService
from engage.domain.value import AnimeId, CommentId, EpisodeId

from .items import CommentItem


class AddReplyRequest(BaseModel):
    """Add reply request."""

    parent_id: UUID
    anime_id: int
    episode_id: int
    user_name: str
    user_avatar: str | None = None
    text: str


class AddReplyResponse(BaseModel):
    """Add reply response."""

    reply: CommentItem
    success: bool = True


class AddReplyUseCase:
    """Use case for replying to a top-level comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add reply use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddReplyRequest) -> AddReplyResponse:
        """Execute add reply flow.

        Args:
            request: Add reply request

        Returns:
            The created reply

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValidationError: If the parent is a reply or input is malformed
        """
        reply = await self.comment_service.add_reply(
            parent_id=CommentId(request.parent_id),
            anime_id=AnimeId(request.anime_id),
            episode_id=EpisodeId(request.episode_id),
            user_name=request.user_name,
            user_avatar=request.user_avatar,
            text=request.text,
        )
        return AddReplyResponse(reply=CommentItem.from_comment(reply))
