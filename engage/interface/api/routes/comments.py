"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from engage.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    AddReplyRequest,
    AddReplyResponse,
    AddReplyUseCase,
    CommentItem,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
    UserCommentItem,
)
from engage.config import CommentSettings
from engage.domain.error import DomainError
from engage.interface.api.routes.params import positive_int, sort_order
from engage.interface.error import http_error

router = APIRouter(prefix="/api", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for creating a comment or reply."""

    anime_id: int
    episode_id: int
    user_name: str
    user_avatar: str | None = None
    text: str


class DeleteCommentAPIRequest(BaseModel):
    """API request for deleting a comment."""

    user_name: str


@router.get("/comments/{comment_id}/replies", response_model=list[CommentItem])
async def get_replies(
    comment_id: UUID,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> list[CommentItem]:
    """Get the replies of a comment, oldest first.

    Args:
        comment_id: Comment UUID
        get_replies_use_case: Get replies use case from DI

    Returns:
        Replies of the comment (empty for unknown comments)
    """
    try:
        return await get_replies_use_case.execute(
            GetRepliesRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise http_error(e, "Failed to fetch replies")


@router.get("/comments/{anime_id:int}/{episode_id:int}", response_model=GetCommentsResponse)
async def get_comments(
    anime_id: int,
    episode_id: int,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    settings: FromDishka[CommentSettings],
    page: str | None = None,
    limit: str | None = None,
    sort: str | None = None,
    user_id: str | None = None,
) -> GetCommentsResponse:
    """Get one page of an episode's top-level comments with their replies.

    Malformed ``page``/``limit`` values fall back to the defaults and an
    unknown ``sort`` means most recent first.

    Args:
        anime_id: Anime ID
        episode_id: Episode ID
        get_comments_use_case: Get comments use case from DI
        settings: Comment listing settings from DI
        page: 1-based page number
        limit: Page size, capped by configuration
        sort: "recent" or "likes"
        user_id: Liker token, to report which comments it liked

    Returns:
        Comments with pagination info
    """
    request = GetCommentsRequest(
        anime_id=anime_id,
        episode_id=episode_id,
        page=positive_int(page, 1),
        limit=positive_int(limit, settings.default_page_size, settings.max_page_size),
        sort=sort_order(sort),
        user_id=user_id or None,
    )
    try:
        return await get_comments_use_case.execute(request)
    except DomainError as e:
        raise http_error(e, "Failed to fetch comments")


@router.post(
    "/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> CommentItem:
    """Post a top-level comment.

    Args:
        request: Comment data
        add_comment_use_case: Add comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: 400 if the name, avatar or text is invalid
    """
    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(**request.model_dump())
        )
    except DomainError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise http_error(e, "Failed to add comment")


@router.post(
    "/comments/{comment_id}/reply",
    response_model=AddReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    comment_id: UUID,
    request: CommentAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
) -> AddReplyResponse:
    """Reply to a top-level comment.

    Args:
        comment_id: Parent comment UUID
        request: Reply data
        add_reply_use_case: Add reply use case from DI

    Returns:
        Created reply

    Raises:
        HTTPException: 404 if the parent doesn't exist, 400 if it is a reply
            itself or the input is invalid
    """
    try:
        return await add_reply_use_case.execute(
            AddReplyRequest(parent_id=comment_id, **request.model_dump())
        )
    except DomainError as e:
        logfire.warn("Reply creation failed", parent_id=str(comment_id), error=str(e))
        raise http_error(e, "Failed to add reply")


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    request: DeleteCommentAPIRequest,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete one's own comment together with its replies and likes.

    Args:
        comment_id: Comment UUID
        request: Name of the caller
        delete_comment_use_case: Delete comment use case from DI

    Returns:
        Confirmation with the number of comments removed

    Raises:
        HTTPException: 404 if not found, 403 if the caller is not the author
    """
    if not request.user_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment ID and user name are required",
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_name=request.user_name)
        )
    except DomainError as e:
        logfire.warn("Comment deletion failed", comment_id=str(comment_id), error=str(e))
        raise http_error(e, "Failed to delete comment")


@router.get("/user/{user_name}/comments", response_model=list[UserCommentItem])
async def get_user_comments(
    user_name: str,
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
) -> list[UserCommentItem]:
    """Get everything a user has written, newest first.

    Args:
        user_name: Author name
        get_user_comments_use_case: Get user comments use case from DI

    Returns:
        Comments labelled with anime name and episode number
    """
    try:
        return await get_user_comments_use_case.execute(
            GetUserCommentsRequest(user_name=user_name)
        )
    except DomainError as e:
        raise http_error(e, "Failed to fetch user comments")
