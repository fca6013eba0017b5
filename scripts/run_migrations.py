#!/usr/bin/env python3
"""Apply the wl_comment / wl_users schema with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from margin.config import Settings
from margin.util.logging import setup_logging
from margin.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting database migrations")

        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Never start the app against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
