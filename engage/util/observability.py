"""Logfire setup and instrumentation.

Services open a span per operation and log outcomes with structured
attributes:

    with logfire.span("like_service.like_comment", comment_id=str(comment_id)):
        ...
        logfire.info("Comment liked", comment_id=str(comment_id), user_id=user_id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from engage.config import Settings

SERVICE_NAME = "engage-api"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    # An explicit flag wins; otherwise send only when a token is configured
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` spans and logs only go to the
    console. ``OBSERVABILITY__SEND_TO_LOGFIRE`` overrides that choice.

    Args:
        settings: Application settings
    """
    send = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha if settings.git_sha != "unknown" else SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        analytics_timezone=settings.analytics.timezone,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request, tagging spans with method and path."""

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": getattr(request, "method", None),
            "path": request.url.path if hasattr(request, "url") else None,
        }

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through an engine.

    Statements carry a SQL comment with the span context so slow queries
    in ``pg_stat_statements`` can be traced back to their request.
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
