"""Identity provider domain service."""

from typing import Any

import logfire

from gatehouse.domain.model import ClaimsSet, Identity, to_custom_claims
from gatehouse.domain.value import UserId

from .base import Service


class IdentityClient:
    """Generic interface to the external identity provider."""

    async def get_identity(self, uid: UserId) -> Identity | None:
        """Fetch an identity by uid.

        Args:
            uid: Identity uid

        Returns:
            Identity if it exists, None otherwise
        """
        raise NotImplementedError

    async def create_identity(self, email: str, password: str) -> Identity:
        """Create an email/password identity.

        Args:
            email: Email address
            password: Initial password

        Returns:
            Created identity
        """
        raise NotImplementedError

    async def set_custom_claims(self, uid: UserId, claims: dict[str, Any]) -> None:
        """Replace the claims bag attached to an identity.

        Args:
            uid: Identity uid
            claims: Raw claims bag
        """
        raise NotImplementedError

    async def revoke_refresh_tokens(self, uid: UserId) -> None:
        """Invalidate the identity's refresh tokens, forcing a new sign-in.

        Args:
            uid: Identity uid
        """
        raise NotImplementedError


class IdentityService(Service):
    """Domain service for identity provider operations."""

    def __init__(self, identity_client: IdentityClient) -> None:
        """Initialize identity service.

        Args:
            identity_client: Identity provider client
        """
        self.identity_client = identity_client

    async def get_identity(self, uid: UserId) -> Identity | None:
        """Fetch an identity by uid."""
        with logfire.span("identity_service.get_identity", uid=uid):
            return await self.identity_client.get_identity(uid)

    async def create_identity(self, email: str, password: str) -> Identity:
        """Create an email/password identity."""
        with logfire.span("identity_service.create_identity", email=email):
            identity = await self.identity_client.create_identity(email, password)
            logfire.info("Identity created", uid=identity.uid, email=email)
            return identity

    async def apply_claims(self, uid: UserId, claims: ClaimsSet | None) -> None:
        """Attach a claims set to an identity.

        Tokens issued before this call keep their old claims until they
        expire or are refreshed.

        Args:
            uid: Identity uid
            claims: Claims to attach, None to clear
        """
        with logfire.span("identity_service.apply_claims", uid=uid):
            bag = to_custom_claims(claims)
            await self.identity_client.set_custom_claims(uid, bag)
            logfire.info("Claims applied", uid=uid, claims=bag)

    async def revoke_sessions(self, uid: UserId) -> None:
        """Force the identity to sign in again, re-running sign-in validation."""
        with logfire.span("identity_service.revoke_sessions", uid=uid):
            await self.identity_client.revoke_refresh_tokens(uid)
            logfire.info("Sessions revoked", uid=uid)
