"""HTTP application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from engage.config import Settings
from engage.interface.api.routes import comments, health, likes, views
from engage.util.di.container import create_container, setup_di
from engage.util.observability import instrument_fastapi

ROUTERS = (health.router, comments.router, likes.router, views.router)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Closing the container disposes the database pool
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Build the API with production providers.

    Configure logfire before calling this; ``scripts/start_app.py`` does.
    Tests replace the container afterwards with ``setup_di``.
    """
    settings = Settings()

    app = FastAPI(
        title="Engage API",
        description="Comments, likes and view analytics for anime episodes",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app)

    # The site only sends simple JSON requests; no auth headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app, create_container())
    for router in ROUTERS:
        app.include_router(router)

    return app
