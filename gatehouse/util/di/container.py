"""Dependency injection container."""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from gatehouse.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to REQUEST-scoped factories
    return make_async_container(*provider_instances, FastapiProvider())


def close_on_shutdown(
    container: AsyncContainer,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build an app lifespan that closes the container when the server stops.

    Closing the container finalizes APP-scoped resources, which disposes the
    record store connection pool.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await container.close()

    return lifespan


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can resolve ``FromDishka`` dependencies.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
