"""Get like status use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.domain.service import LikeService
from engage.domain.value import CommentId


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    comment_id: UUID
    user_id: str


class GetLikeStatusResponse(BaseModel):
    """Get like status response."""

    comment_id: str
    user_id: str
    has_liked: bool


class GetLikeStatusUseCase:
    """Use case for checking whether a user liked a comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        """Execute like status check."""
        has_liked = await self.like_service.has_user_liked_comment(
            CommentId(request.comment_id), request.user_id
        )
        return GetLikeStatusResponse(
            comment_id=str(request.comment_id),
            user_id=request.user_id,
            has_liked=has_liked,
        )
