"""Identity provider clients.

The real client talks to the Identity Toolkit admin REST API, the same
backend the blocking lifecycle hooks are registered with.
"""

import json
import time
from typing import Any
from uuid import uuid4

import httpx
import logfire

from gatehouse.adapter.error import IdentityProviderError
from gatehouse.domain.model import Identity
from gatehouse.domain.service.identity_service import IdentityClient
from gatehouse.domain.value import UserId


class IdentityProviderClient(IdentityClient):
    """Base class for identity provider clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealIdentityToolkitClient(IdentityProviderClient):
    """Identity Toolkit admin client.

    Authenticates with an OAuth access token for a service account that may
    manage the project's users.
    """

    def __init__(
        self,
        base_url: str,
        project_id: str,
        access_token: str | None,
        timeout_seconds: float = 30.0,
    ) -> None:
        """Initialize identity client.

        Args:
            base_url: Identity Toolkit API root, e.g. ``https://identitytoolkit.googleapis.com/v1``
            project_id: Project owning the identities
            access_token: OAuth bearer token for the admin API
            timeout_seconds: Per-request timeout
        """
        self.base_url = base_url.rstrip("/")
        self.project_id = project_id
        self.access_token = access_token
        self.timeout_seconds = timeout_seconds

    def _url(self, action: str) -> str:
        return f"{self.base_url}/projects/{self.project_id}/{action}"

    async def _post(self, action: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST to an admin endpoint and return the decoded body.

        Raises:
            IdentityProviderError: On transport failure or non-200 response
        """
        if not self.access_token:
            raise IdentityProviderError("Identity provider access token not configured")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._url(action),
                    json=payload,
                    headers={"Authorization": f"Bearer {self.access_token}"},
                    timeout=self.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Identity provider HTTP error", action=action, error=str(e))
            raise IdentityProviderError(f"HTTP error calling {action}: {e}")

        if response.status_code != 200:
            logfire.error(
                "Identity provider request failed",
                action=action,
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityProviderError(
                f"{action} failed: {response.status_code}",
                status_code=response.status_code,
            )

        return response.json()

    @staticmethod
    def _to_identity(data: dict[str, Any]) -> Identity:
        raw_claims = data.get("customAttributes")
        return Identity(
            uid=UserId(data["localId"]),
            email=data.get("email"),
            display_name=data.get("displayName"),
            photo_url=data.get("photoUrl"),
            custom_claims=json.loads(raw_claims) if raw_claims else {},
            disabled=data.get("disabled", False),
        )

    async def get_identity(self, uid: UserId) -> Identity | None:
        result = await self._post("accounts:lookup", {"localId": [uid]})
        users = result.get("users") or []
        if not users:
            return None
        return self._to_identity(users[0])

    async def create_identity(self, email: str, password: str) -> Identity:
        result = await self._post(
            "accounts", {"email": email, "password": password}
        )
        logfire.info("Identity created at provider", uid=result["localId"])
        return Identity(uid=UserId(result["localId"]), email=result.get("email", email))

    async def set_custom_claims(self, uid: UserId, claims: dict[str, Any]) -> None:
        await self._post(
            "accounts:update",
            {"localId": uid, "customAttributes": json.dumps(claims)},
        )

    async def revoke_refresh_tokens(self, uid: UserId) -> None:
        # Tokens minted before validSince (epoch seconds) are rejected
        await self._post(
            "accounts:update",
            {"localId": uid, "validSince": str(int(time.time()))},
        )


class MockIdentityClient(IdentityProviderClient):
    """Mock identity client for testing.

    Keeps identities in memory and records revocations instead of calling
    the provider.
    """

    def __init__(self) -> None:
        self.identities: dict[UserId, Identity] = {}
        self.revoked: list[UserId] = []
        self.fail_revocations = False

    def add_identity(self, identity: Identity) -> Identity:
        """Seed an identity as if it already existed at the provider."""
        self.identities[identity.uid] = identity
        return identity

    async def get_identity(self, uid: UserId) -> Identity | None:
        return self.identities.get(uid)

    async def create_identity(self, email: str, password: str) -> Identity:
        for identity in self.identities.values():
            if identity.email == email:
                raise IdentityProviderError("EMAIL_EXISTS", status_code=400)
        identity = Identity(uid=UserId(f"mock-{uuid4().hex[:12]}"), email=email)
        self.identities[identity.uid] = identity
        return identity

    async def set_custom_claims(self, uid: UserId, claims: dict[str, Any]) -> None:
        identity = self.identities.get(uid)
        if identity is None:
            raise IdentityProviderError("USER_NOT_FOUND", status_code=400)
        self.identities[uid] = identity.model_copy(update={"custom_claims": dict(claims)})

    async def revoke_refresh_tokens(self, uid: UserId) -> None:
        if self.fail_revocations:
            raise IdentityProviderError("Revocation unavailable", status_code=503)
        self.revoked.append(uid)
