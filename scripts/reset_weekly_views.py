#!/usr/bin/env python3
"""Purge weekly view counters of past weeks.

Meant to be run by an external scheduler (cron, Kubernetes CronJob) shortly
after the week rolls over. Running it more often is harmless.
"""

import asyncio
import sys

import logfire
from engage.application.usecase.view import ResetWeeklyViewsUseCase
from engage.config import Settings
from engage.util.di.container import create_script_container
from engage.util.observability import configure_logfire


async def reset() -> int:
    """Run one reset inside its own unit of work."""
    container = create_script_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ResetWeeklyViewsUseCase)
            result = await use_case.execute()
        logfire.info(
            "Weekly reset finished", deleted=result.deleted, week_start=result.week_start
        )
        return result.deleted
    finally:
        # Disposes the engine pool
        await container.close()


def main() -> int:
    """Reset weekly views and log any errors to Logfire."""
    configure_logfire(Settings())

    try:
        asyncio.run(reset())
        return 0
    except Exception as e:
        logfire.error(
            "Weekly reset failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
