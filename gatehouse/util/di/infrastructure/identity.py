"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from gatehouse.adapter.identity.client import RealIdentityToolkitClient
from gatehouse.config import Settings
from gatehouse.domain.service import IdentityClient
from gatehouse.util.di.base import ProviderBase
from gatehouse.util.observability import instrument_httpx


class IdentityProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider client."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityClient:
        """Provide identity provider admin client.

        The access token is only checked when a call is made, so hook
        handling (which never calls the provider) works without one.
        """
        instrument_httpx()
        return RealIdentityToolkitClient(
            base_url=settings.identity.base_url,
            project_id=settings.identity.project_id,
            access_token=settings.identity.access_token,
            timeout_seconds=settings.identity.timeout_seconds,
        )
