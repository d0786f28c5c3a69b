"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Invite accepted", invite_id=invite.id, user_id=user_id)

    with logfire.span("membership_service.materialize", user_id=user_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gatehouse.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is decided by, in order: the explicit
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` setting, then presence of
    ``OBSERVABILITY__LOGFIRE_TOKEN``. Without either, output is console-only.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "gatehouse",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request, including lifecycle hook calls.

    Headers are not captured: hook calls carry the shared hook secret and
    CRUD calls carry bearer claims tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, capture_headers=False)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace record store queries and transaction boundaries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound calls to the identity provider."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
