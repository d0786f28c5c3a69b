"""Bootstrap super admin use case."""

import logfire
from pydantic import BaseModel, model_validator

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.domain.error import NotFoundError
from gatehouse.domain.model import SuperAdminClaims, User, utcnow
from gatehouse.domain.service import IdentityService, UserService
from gatehouse.domain.value import Role, UserId


class BootstrapSuperAdminRequest(BaseModel):
    """Either an existing identity uid, or credentials for a new identity."""

    uid: str | None = None
    email: str | None = None
    password: str | None = None

    @model_validator(mode="after")
    def check_mode(self) -> "BootstrapSuperAdminRequest":
        """Require exactly one of the two bootstrap modes."""
        if self.uid:
            return self
        if self.email and self.password:
            return self
        raise ValueError("Provide either uid, or email and password")


class BootstrapSuperAdminResponse(BaseModel):
    """Bootstrapped super admin."""

    uid: str
    email: str
    created_identity: bool


class BootstrapSuperAdminUseCase(BaseUseCase):
    """Create or promote the super-role identity.

    This is the one path that writes a user record outside materialization.
    The record it writes is what lets account-creation validation approve the
    super admin's email without an invite later on.
    """

    def __init__(
        self, identity_service: IdentityService, user_service: UserService
    ) -> None:
        """Initialize use case.

        Args:
            identity_service: Identity provider domain service
            user_service: User domain service
        """
        self.identity_service = identity_service
        self.user_service = user_service

    async def execute(
        self, request: BootstrapSuperAdminRequest
    ) -> BootstrapSuperAdminResponse:
        """Bootstrap the super admin.

        Args:
            request: Existing uid, or email and password for a new identity

        Returns:
            The super admin's uid and email

        Raises:
            NotFoundError: If the given uid has no identity
        """
        with logfire.span("bootstrap_super_admin.execute", uid=request.uid):
            if request.uid:
                identity = await self.identity_service.get_identity(UserId(request.uid))
                if not identity:
                    raise NotFoundError("Identity", request.uid)
                created_identity = False
            else:
                identity = await self.identity_service.create_identity(
                    request.email, request.password
                )
                created_identity = True

            await self.identity_service.apply_claims(identity.uid, SuperAdminClaims())

            email = identity.email or request.email or ""
            existing = await self.user_service.find_by_id(identity.uid)
            now = utcnow()
            record = User(
                id=identity.uid,
                email=email,
                display_name=identity.display_name or "",
                photo_url=identity.photo_url or "",
                org_id=None,
                role=Role.SUPER_ADMIN,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            await self.user_service.save(record)

            logfire.info(
                "Super admin bootstrapped",
                uid=identity.uid,
                email=email,
                created_identity=created_identity,
            )
            return BootstrapSuperAdminResponse(
                uid=identity.uid, email=email, created_identity=created_identity
            )
