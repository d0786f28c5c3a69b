"""Identity provider adapter."""

from .client import (
    IdentityProviderClient,
    MockIdentityClient,
    RealIdentityToolkitClient,
)

__all__ = ["IdentityProviderClient", "RealIdentityToolkitClient", "MockIdentityClient"]
