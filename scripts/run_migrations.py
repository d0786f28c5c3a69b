#!/usr/bin/env python3
"""Apply record store migrations.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py --revision 3c1f9a2d7b40
    python scripts/run_migrations.py --sql        # print SQL instead of applying
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from gatehouse.config import Settings
from gatehouse.util.logging import setup_logging
from gatehouse.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply record store migrations")
    parser.add_argument("--revision", default="head", help="Target revision")
    parser.add_argument(
        "--sql", action="store_true", help="Emit SQL for a DBA instead of applying it"
    )
    parser.add_argument("--config", default="alembic.ini", help="Alembic config file")
    return parser.parse_args(argv)


def main() -> int:
    """Upgrade the schema and log any errors to Logfire."""
    args = parse_args()
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        settings.check_deployable()
        logfire.info(
            "Upgrading record store schema", revision=args.revision, offline=args.sql
        )

        command.upgrade(Config(args.config), args.revision, sql=args.sql)

        logfire.info("Record store schema upgraded", revision=args.revision)
        return 0

    except Exception as e:
        logfire.error(
            "Record store migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Hooks must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
