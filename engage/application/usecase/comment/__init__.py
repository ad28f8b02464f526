"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .add_reply import AddReplyRequest, AddReplyResponse, AddReplyUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    PaginationInfo,
    ThreadedCommentItem,
)
from .get_replies import GetRepliesRequest, GetRepliesUseCase
from .get_user_comments import (
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
    UserCommentItem,
)
from .items import CommentItem

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "AddReplyRequest",
    "AddReplyResponse",
    "AddReplyUseCase",
    "CommentItem",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetUserCommentsRequest",
    "GetUserCommentsUseCase",
    "PaginationInfo",
    "ThreadedCommentItem",
    "UserCommentItem",
]
