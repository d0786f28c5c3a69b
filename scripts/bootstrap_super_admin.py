#!/usr/bin/env python3
"""Create or promote the super admin identity.

Usage:
    python scripts/bootstrap_super_admin.py --email root@example.com --password '...'
    python scripts/bootstrap_super_admin.py --uid <existing-identity-uid>
"""

import argparse
import asyncio
import sys

import logfire

from gatehouse.application.usecase.admin import (
    BootstrapSuperAdminRequest,
    BootstrapSuperAdminUseCase,
)
from gatehouse.config import Settings
from gatehouse.util.di.container import create_container
from gatehouse.util.logging import setup_logging
from gatehouse.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--uid", help="Promote an existing identity")
    parser.add_argument("--email", help="Email for a new identity")
    parser.add_argument("--password", help="Password for a new identity")
    args = parser.parse_args(argv)
    if not args.uid and not (args.email and args.password):
        parser.error("provide --uid, or both --email and --password")
    return args


async def bootstrap(args: argparse.Namespace) -> None:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(BootstrapSuperAdminUseCase)
            response = await use_case.execute(
                BootstrapSuperAdminRequest(
                    uid=args.uid, email=args.email, password=args.password
                )
            )
    finally:
        await container.close()

    print(f"Super admin ready: uid={response.uid} email={response.email}")


def main() -> int:
    """Run the bootstrap and log any errors to Logfire."""
    args = parse_args()
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        asyncio.run(bootstrap(args))
        return 0

    except Exception as e:
        logfire.error(
            "Super admin bootstrap failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
