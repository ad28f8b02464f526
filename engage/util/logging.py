"""Stdlib logging setup.

uvicorn, alembic and asyncpg log through the standard ``logging`` module.
Their records are forwarded to Logfire so the console and the Logfire
project show one stream. Call after ``configure_logfire``.
"""

import logging

import logfire

from engage.config import Settings

# Levels for chatty third-party loggers
LIBRARY_LEVELS = {
    "asyncpg": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "alembic": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Forward stdlib log records to Logfire.

    Args:
        settings: Application settings; ``debug`` lowers the level to DEBUG
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by uvicorn or alembic
    )
    for name, library_level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)
    logging.getLogger("engage").setLevel(level)

    logfire.info(
        "Stdlib logging forwarded to Logfire",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
