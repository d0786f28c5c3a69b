"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from gatehouse.interface.api.routes import health, hooks, invites, orgs, users
from gatehouse.util.di.container import close_on_shutdown, create_container, setup_di
from gatehouse.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted.
            A container passed in is owned by the caller and is not closed
            when the app shuts down.

    Returns:
        Configured application
    """
    owns_container = container is None
    container = container or create_container()

    app_instance = FastAPI(
        title="Gatehouse",
        description="Invitation-only access control for a multi-tenant identity platform",
        version="0.1.0",
        lifespan=close_on_shutdown(container) if owns_container else None,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    setup_di(app_instance, container)

    # Lifecycle hooks called by the identity platform
    app_instance.include_router(health.router)
    app_instance.include_router(hooks.router)

    # Administration and downstream lookups
    app_instance.include_router(orgs.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(users.router)

    return app_instance
