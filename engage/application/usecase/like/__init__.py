"""Like use cases."""

from .get_like_status import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
)
from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .unlike_comment import (
    UnlikeCommentRequest,
    UnlikeCommentResponse,
    UnlikeCommentUseCase,
)

__all__ = [
    "GetLikeStatusRequest",
    "GetLikeStatusResponse",
    "GetLikeStatusUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "UnlikeCommentRequest",
    "UnlikeCommentResponse",
    "UnlikeCommentUseCase",
]
