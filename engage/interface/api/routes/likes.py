"""Like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from engage.application.usecase.like import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentRequest,
    UnlikeCommentResponse,
    UnlikeCommentUseCase,
)
from engage.domain.error import DomainError
from engage.interface.error import http_error

router = APIRouter(prefix="/api/comments", tags=["likes"], route_class=DishkaRoute)


class LikeAPIRequest(BaseModel):
    """API request for liking or unliking a comment."""

    user_id: str


@router.post("/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: UUID,
    request: LikeAPIRequest,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
) -> LikeCommentResponse:
    """Like a comment.

    Liking twice is not an error: the second call reports ``liked=False``.

    Args:
        comment_id: Comment UUID
        request: Liker token
        like_comment_use_case: Like comment use case from DI

    Returns:
        Whether the like was recorded

    Raises:
        HTTPException: 404 if the comment doesn't exist, 400 for a bad user ID
    """
    try:
        return await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=request.user_id)
        )
    except DomainError as e:
        raise http_error(e, "Server error while processing the like")


@router.post("/{comment_id}/unlike", response_model=UnlikeCommentResponse)
async def unlike_comment(
    comment_id: UUID,
    request: LikeAPIRequest,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
) -> UnlikeCommentResponse:
    """Remove a like from a comment.

    Args:
        comment_id: Comment UUID
        request: Liker token
        unlike_comment_use_case: Unlike comment use case from DI

    Returns:
        Whether a like was removed
    """
    try:
        return await unlike_comment_use_case.execute(
            UnlikeCommentRequest(comment_id=comment_id, user_id=request.user_id)
        )
    except DomainError as e:
        raise http_error(e, "Server error while processing the unlike")


@router.get("/{comment_id}/like", response_model=GetLikeStatusResponse)
async def get_like_status(
    comment_id: UUID,
    user_id: str,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
) -> GetLikeStatusResponse:
    """Check whether a user has liked a comment."""
    try:
        return await get_like_status_use_case.execute(
            GetLikeStatusRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Failed to check like status")
