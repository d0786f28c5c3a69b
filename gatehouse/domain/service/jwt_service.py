"""Claims token domain service."""

import logfire

from gatehouse.config import AuthSettings
from gatehouse.domain.model.claims import ClaimsSet
from gatehouse.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for claims token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, email: str, claims: ClaimsSet | None
    ) -> str:
        """Create a claims token for an identity.

        Args:
            user_id: Identity uid
            email: Identity email
            claims: Claims to embed

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, email, claims, self.auth_settings)
            logfire.info(
                "Claims token created",
                user_id=user_id,
                ttl_minutes=self.auth_settings.token_ttl_minutes,
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a claims token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid, expired or carries malformed claims
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Claims token verification failed", error=str(e))
                raise
            logfire.info("Claims token verified", user_id=payload.user_id)
            return payload

    def get_payload_from_header(self, authorization: str | None) -> TokenPayload | None:
        """Extract a verified payload from an ``Authorization`` header.

        Args:
            authorization: Raw header value

        Returns:
            Token payload if the header carries a valid bearer token, None
            otherwise
        """
        if not authorization or not authorization.startswith("Bearer "):
            return None

        try:
            return self.verify_token(authorization[len("Bearer ") :])
        except JWTError:
            return None
