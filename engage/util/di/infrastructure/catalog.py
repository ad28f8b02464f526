"""Catalog infrastructure providers."""

from dishka import Scope, provide

from engage.config import Settings
from engage.domain.repository import AnimeRepository
from engage.persistence.repository import JsonAnimeRepository
from engage.util.di.base import ProviderBase


class CatalogProvider(ProviderBase):
    """Catalog component base."""

    __mock_component__ = "catalog"


class ProdCatalogProvider(CatalogProvider):
    """Production catalog provider reading the preloaded JSON file."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_anime_repository(self, settings: Settings) -> AnimeRepository:
        """Provide the catalog, loaded once per application."""
        return JsonAnimeRepository(settings.catalog.data_path)
