"""Container factories for the API and for scripts."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from engage.util.di import PROVIDERS, get_provider


def _production_providers() -> list[Provider]:
    return [get_provider(base, use_mock=False)() for base in PROVIDERS]


def create_container() -> AsyncContainer:
    """Build the API container: production components plus FastAPI context."""
    return make_async_container(*_production_providers(), FastapiProvider())


def create_script_container() -> AsyncContainer:
    """Build a container for scripts run outside of a request.

    Scripts open their own request scope to get a session that commits on
    exit, the same unit of work an HTTP request gets.
    """
    return make_async_container(*_production_providers())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app so ``FromDishka`` parameters resolve."""
    setup_dishka(container, app)
