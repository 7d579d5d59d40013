#!/usr/bin/env python3
"""Upgrade the Penpal database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from penpal.config import Settings
from penpal.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Apply migrations up to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The deploy must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
