"""Claims token utilities.

A claims token is the bearer credential downstream services authorize with.
Its payload carries the standard identity fields (``sub``, ``email``) and
exactly the claims-set fields. Anything it asserts is only as fresh as its
``iat``; ``exp`` bounds how stale it can get.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from gatehouse.config import AuthSettings
from gatehouse.domain.error import ClaimsFormatError
from gatehouse.domain.model.claims import (
    ClaimsSet,
    parse_optional_claims,
    to_custom_claims,
)


class TokenPayload(BaseModel):
    """Verified claims token payload."""

    sub: str
    email: str
    iat: datetime
    exp: datetime
    claims: ClaimsSet | None = None

    @property
    def user_id(self) -> str:
        """Identity uid the token was issued to."""
        return self.sub


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str,
    claims: ClaimsSet | None,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    """Create a claims token for an identity.

    Args:
        user_id: Identity uid
        email: Identity email
        claims: Claims to embed (None for a not-yet-materialized identity)
        settings: Authentication settings
        issued_at: Issue time, defaults to now

    Returns:
        Encoded JWT token
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(minutes=settings.token_ttl_minutes)

    payload = {
        "sub": user_id,
        "email": email,
        "iat": issued_at,
        "exp": expiry,
        **to_custom_claims(claims),
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a claims token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or carries malformed claims
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if not payload.get("email"):
        raise JWTError("Invalid token")

    try:
        claims = parse_optional_claims(payload)
    except ClaimsFormatError as e:
        raise JWTError(f"Malformed claims: {e}")

    return TokenPayload(
        sub=payload["sub"],
        email=payload["email"],
        iat=payload["iat"],
        exp=payload["exp"],
        claims=claims,
    )
