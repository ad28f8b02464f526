"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from engage.domain.service import CommentService
from engage.domain.value import CommentId

from .items import CommentItem


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: UUID


class GetRepliesUseCase:
    """Use case for listing the replies of one comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> list[CommentItem]:
        """Return the replies, oldest first."""
        replies = await self.comment_service.get_replies_for_comment(
            CommentId(request.comment_id)
        )
        return [CommentItem.from_comment(r) for r in replies]
