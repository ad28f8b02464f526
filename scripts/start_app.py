#!/usr/bin/env python3
"""Migrate the database, then serve the API with uvicorn."""

import sys

import logfire
import uvicorn

from engage.config import Settings
from engage.util.logging import setup_logging
from engage.util.observability import configure_logfire
from run_migrations import upgrade_to_head


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        upgrade_to_head()
        logfire.info("Serving API", host=settings.host, port=settings.port)
        # The factory builds the app (and its container) inside the worker
        uvicorn.run(
            "engage.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_config=None,  # Keep the handlers installed by setup_logging
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
