"""Unlike comment use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.domain.service import LikeService
from engage.domain.value import CommentId


class UnlikeCommentRequest(BaseModel):
    """Unlike comment request."""

    comment_id: UUID
    user_id: str


class UnlikeCommentResponse(BaseModel):
    """Unlike comment response."""

    unliked: bool
    message: str


class UnlikeCommentUseCase:
    """Use case for removing a like from a comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize unlike comment use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: UnlikeCommentRequest) -> UnlikeCommentResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            ValidationError: If the user ID is malformed
        """
        unliked = await self.like_service.unlike_comment(
            CommentId(request.comment_id), request.user_id
        )
        return UnlikeCommentResponse(
            unliked=unliked,
            message=(
                "Comment unliked successfully"
                if unliked
                else "You have not liked this comment"
            ),
        )
