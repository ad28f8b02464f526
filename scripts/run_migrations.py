#!/usr/bin/env python3
"""Bring the database schema up to the latest alembic revision."""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from engage.config import Settings
from engage.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def upgrade_to_head(config_path: str = ALEMBIC_INI) -> str:
    """Apply pending migrations.

    Returns:
        The head revision the schema is now at
    """
    config = Config(config_path)
    head = ScriptDirectory.from_config(config).get_current_head() or "base"

    with logfire.span("migrations.upgrade", head=head):
        command.upgrade(config, "head")
    return head


def main() -> int:
    configure_logfire(Settings())

    try:
        head = upgrade_to_head()
    except Exception as e:
        # Fail the deploy rather than serve against a half-migrated schema
        logfire.error(
            "Migrations failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Schema at head", revision=head)
    return 0


if __name__ == "__main__":
    sys.exit(main())
