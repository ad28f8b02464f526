"""Application layer DI providers."""

from dishka import Scope, provide

from engage.application.usecase.comment import (
    AddCommentUseCase,
    AddReplyUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    GetUserCommentsUseCase,
)
from engage.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from engage.application.usecase.view import (
    GetAnimeViewsUseCase,
    GetWeeklyPopularUseCase,
    RecordViewUseCase,
    ResetWeeklyViewsUseCase,
)
from engage.domain.repository import AnimeRepository
from engage.domain.service import AnalyticsService, CommentService, LikeService
from engage.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(self, comment_service: CommentService) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, like_service: LikeService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, like_service=like_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_comments_use_case(
        self, comment_service: CommentService, anime_repository: AnimeRepository
    ) -> GetUserCommentsUseCase:
        """Provide get user comments use case."""
        return GetUserCommentsUseCase(
            comment_service=comment_service, anime_repository=anime_repository
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, like_service: LikeService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, like_service: LikeService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_get_like_status_use_case(
        self, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide like status use case."""
        return GetLikeStatusUseCase(like_service=like_service)

    # View use cases
    @provide(scope=Scope.REQUEST)
    def get_record_view_use_case(
        self, analytics_service: AnalyticsService
    ) -> RecordViewUseCase:
        """Provide record view use case."""
        return RecordViewUseCase(analytics_service=analytics_service)

    @provide(scope=Scope.REQUEST)
    def get_get_anime_views_use_case(
        self, analytics_service: AnalyticsService, anime_repository: AnimeRepository
    ) -> GetAnimeViewsUseCase:
        """Provide anime views use case."""
        return GetAnimeViewsUseCase(
            analytics_service=analytics_service, anime_repository=anime_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_get_weekly_popular_use_case(
        self, analytics_service: AnalyticsService
    ) -> GetWeeklyPopularUseCase:
        """Provide weekly popular use case."""
        return GetWeeklyPopularUseCase(analytics_service=analytics_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_weekly_views_use_case(
        self, analytics_service: AnalyticsService
    ) -> ResetWeeklyViewsUseCase:
        """Provide weekly reset use case."""
        return ResetWeeklyViewsUseCase(analytics_service=analytics_service)
