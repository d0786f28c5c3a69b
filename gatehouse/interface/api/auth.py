"""Request authentication helpers shared by the routes.

Hook calls present the shared hook secret. CRUD calls present a claims
token issued by ``JWTService``.
"""

import secrets

from fastapi import HTTPException, status

from gatehouse.config import Settings
from gatehouse.domain.model import satisfies_role
from gatehouse.domain.service import JWTService
from gatehouse.domain.value import Role
from gatehouse.util.jwt import TokenPayload


def verify_hook_secret(authorization: str | None, settings: Settings) -> None:
    """Reject hook calls that do not carry the configured hook secret.

    Args:
        authorization: Raw ``Authorization`` header
        settings: Application settings

    Raises:
        HTTPException: 401 if the secret is missing or wrong
    """
    expected = f"Bearer {settings.auth.hook_secret}"
    if not authorization or not secrets.compare_digest(
        authorization.encode(), expected.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid hook credentials",
        )


def require_token(authorization: str | None, jwt_service: JWTService) -> TokenPayload:
    """Verify the caller's bearer claims token.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    payload = jwt_service.get_payload_from_header(authorization)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return payload


def require_role(
    authorization: str | None, jwt_service: JWTService, required: Role
) -> TokenPayload:
    """Verify the caller's token and check its claims against the role hierarchy.

    The super-role passes every check.

    Raises:
        HTTPException: 401 if not authenticated, 403 if the role is too low
    """
    payload = require_token(authorization, jwt_service)
    if not satisfies_role(payload.claims, required):
        detail = (
            "Super admin access required"
            if required is Role.SUPER_ADMIN
            else f"Role {required.value} or higher required"
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
    return payload


def require_super_admin(
    authorization: str | None, jwt_service: JWTService
) -> TokenPayload:
    """Verify the caller's token and require the super-role."""
    return require_role(authorization, jwt_service, Role.SUPER_ADMIN)
