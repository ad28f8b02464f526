"""In-memory doubles and the test container."""

from .catalog import SAMPLE_CATALOG, MockCatalogProvider
from .container import build_test_container, known_components
from .persistence import MockPersistenceProvider

__all__ = [
    "MockCatalogProvider",
    "MockPersistenceProvider",
    "SAMPLE_CATALOG",
    "build_test_container",
    "known_components",
]
