"""Infrastructure providers."""

# Import bases
from .catalog import CatalogProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .catalog import ProdCatalogProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CatalogProvider",
    "PersistenceProvider",
    "ProdCatalogProvider",
    "ProdPersistenceProvider",
]
