"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.domain.error import NotAuthorizedError, NotFoundError
from engage.domain.service import CommentService
from engage.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID
    user_name: str  # Name the caller claims to have commented under


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    removed: int


class DeleteCommentUseCase:
    """Use case for an author deleting their own comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Load the comment
        2. Check the caller is its author
        3. Delete it with its replies and likes

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is not the author
        """
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))

        if comment.user_name.root != request.user_name:
            raise NotAuthorizedError("comment", str(comment_id), request.user_name)

        removed = await self.comment_service.delete_comment(comment_id)
        return DeleteCommentResponse(
            message="Comment deleted successfully", removed=removed
        )
