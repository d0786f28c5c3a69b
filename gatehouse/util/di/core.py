"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gatehouse.config import AuthSettings, Settings
from gatehouse.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If staging or production still uses placeholder secrets
        """
        settings = Settings()
        settings.check_deployable()
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
