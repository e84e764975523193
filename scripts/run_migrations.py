#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from remark.config import Settings
from remark.util.logging import setup_logging
from remark.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``, logging failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "migrations"))

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the process exits non-zero
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
