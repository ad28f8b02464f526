"""Domain layer DI providers."""

from dishka import Scope, provide

from engage.config import AnalyticsSettings
from engage.domain.repository import (
    AnimeRepository,
    CommentRepository,
    LikeRepository,
    ViewRepository,
)
from engage.domain.service import (
    AnalyticsService,
    CommentService,
    LikeService,
    ViewCountCache,
)
from engage.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, comment_repository=comment_repository
        )

    @provide
    def get_analytics_service(
        self,
        view_repository: ViewRepository,
        anime_repository: AnimeRepository,
        view_cache: ViewCountCache,
        settings: AnalyticsSettings,
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            view_repository=view_repository,
            anime_repository=anime_repository,
            view_cache=view_cache,
            settings=settings,
        )
