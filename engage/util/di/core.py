"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from engage.config import AnalyticsSettings, CommentSettings, Settings
from engage.domain.service import ViewCountCache
from engage.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment listing settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        """Provide analytics settings."""
        return settings.analytics

    @provide(scope=Scope.APP)
    def provide_view_cache(self, analytics_settings: AnalyticsSettings) -> ViewCountCache:
        """Provide the view count cache shared by every request."""
        return ViewCountCache(ttl_seconds=analytics_settings.cache_ttl_seconds)
