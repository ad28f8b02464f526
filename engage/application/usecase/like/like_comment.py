"""Like comment use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.domain.service import LikeService
from engage.domain.value import CommentId


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: UUID
    user_id: str


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    liked: bool
    message: str


class LikeCommentUseCase:
    """Use case for liking a comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize like comment use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        A repeated like is not an error; ``liked`` is False instead.

        Raises:
            NotFoundError: If the comment doesn't exist
            ValidationError: If the user ID is malformed
        """
        liked = await self.like_service.like_comment(
            CommentId(request.comment_id), request.user_id
        )
        return LikeCommentResponse(
            liked=liked,
            message=(
                "Comment liked successfully"
                if liked
                else "You have already liked this comment"
            ),
        )
