"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and an in-memory implementation:
# "identity" is the identity provider admin client, "persistence" the record store.
Component = Literal["identity", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a swappable component: one subclass
    sets ``__is_mock__ = True`` and is selected for tests.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is the in-memory implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
