"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. Core entries are concrete
providers; component entries are bases whose implementation is picked by
``get_provider`` (production in the app, in-memory doubles in tests).
"""

from typing import Type

from engage.util.di.application import ProdApplicationProvider
from engage.util.di.base import Component, ProviderBase
from engage.util.di.core import ProdConfigProvider
from engage.util.di.domain import ProdDomainProvider
from engage.util.di.infrastructure import (
    CatalogProvider,
    PersistenceProvider,
    ProdCatalogProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Components
    CatalogProvider,
    PersistenceProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """Whether a provider entry has swappable implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the provider class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the in-memory implementation of a component

    Returns:
        ``base`` itself for core providers, otherwise the matching subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not is_component(base):
        return base

    for impl in base.__subclasses__():
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "in-memory" if use_mock else "production"
    raise ValueError(
        f"Component {base.__mock_component__ or base.__name__} has no {kind} provider"
    )


__all__ = [
    "CatalogProvider",
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdCatalogProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "is_component",
]
