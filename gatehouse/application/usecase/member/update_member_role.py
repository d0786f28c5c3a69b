"""Update member role use case."""

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.domain.error import ValidationError
from gatehouse.domain.service import IdentityService, UserService
from gatehouse.domain.value import MEMBER_ROLES, Role, UserId


class UpdateMemberRoleRequest(BaseModel):
    """Change a member's role, or clear it to deactivate the member."""

    user_id: str
    role: str | None = None


class UpdateMemberRoleResponse(BaseModel):
    """Member's role after the change."""

    user_id: str
    org_id: str | None
    role: Role | None
    sessions_revoked: bool


class UpdateMemberRoleUseCase(BaseUseCase):
    """Use case for administrative role changes.

    The user record changes immediately. Tokens already issued keep their old
    claims until they expire; revoking the member's sessions forces a new
    sign-in, which re-validates against the updated record.
    """

    def __init__(
        self, user_service: UserService, identity_service: IdentityService
    ) -> None:
        """Initialize use case.

        Args:
            user_service: User domain service
            identity_service: Identity provider domain service
        """
        self.user_service = user_service
        self.identity_service = identity_service

    async def execute(self, request: UpdateMemberRoleRequest) -> UpdateMemberRoleResponse:
        """Update the member's role.

        Args:
            request: Member uid and new role (None deactivates)

        Returns:
            Updated binding and whether sessions were revoked

        Raises:
            ValidationError: If the role is not a member role
            NotFoundError: If the member has no record
            PermissionDeniedError: If the member is the super-role
        """
        allowed = [role.value for role in MEMBER_ROLES]
        if request.role is not None and request.role not in allowed:
            raise ValidationError(f"Role must be one of: {', '.join(allowed)}")

        user_id = UserId(request.user_id)
        role = Role(request.role) if request.role else None

        with logfire.span("update_member_role.execute", user_id=user_id):
            user = await self.user_service.update_role(user_id, role)

            # The record is already committed; a failed revocation only widens
            # the staleness window up to the token lifetime.
            sessions_revoked = True
            try:
                await self.identity_service.revoke_sessions(user_id)
            except Exception as e:
                sessions_revoked = False
                logfire.error(
                    "Session revocation failed after role change",
                    user_id=user_id,
                    error=str(e),
                )

            return UpdateMemberRoleResponse(
                user_id=user.id,
                org_id=user.org_id,
                role=user.role,
                sessions_revoked=sessions_revoked,
            )
