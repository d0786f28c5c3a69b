"""Create invite use case."""

import secrets
from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.config import Settings
from gatehouse.domain.error import ValidationError
from gatehouse.domain.model import utcnow
from gatehouse.domain.service import InviteService, OrganizationService
from gatehouse.domain.value import MEMBER_ROLES, InviteToken, OrgId, Role, UserId


class CreateInviteRequest(BaseModel):
    """Request to invite an email into an organization."""

    inviter_id: str
    email: str | None = None
    org_id: str | None = None
    role: str | None = None


class CreateInviteResponse(BaseModel):
    """Created invite."""

    invite_id: str
    invite_token: str
    expires_at: datetime


class CreateInviteUseCase(BaseUseCase):
    """Use case for inviting a new member into an organization."""

    def __init__(
        self,
        invite_service: InviteService,
        organization_service: OrganizationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            organization_service: Organization domain service
            settings: Application settings
        """
        self.invite_service = invite_service
        self.organization_service = organization_service
        self.settings = settings

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create a pending invite.

        Args:
            request: Invitee email, organization and role

        Returns:
            The created invite's ID, delivery token and expiry

        Raises:
            ValidationError: If a field is missing or the role is not a member role
            NotFoundError: If the organization does not exist
            ConflictError: If a pending invite already exists for the email
        """
        email = (request.email or "").strip()
        if not email or not request.org_id or not request.role:
            raise ValidationError("Email, orgId, and role are required")

        allowed = [role.value for role in MEMBER_ROLES]
        if request.role not in allowed:
            raise ValidationError(f"Role must be one of: {', '.join(allowed)}")

        org_id = OrgId(request.org_id)
        with logfire.span(
            "create_invite.execute",
            inviter_id=request.inviter_id,
            email=email,
            org_id=org_id,
        ):
            await self.organization_service.get_by_id(org_id)

            expires_at = utcnow() + timedelta(
                days=self.settings.invitations.expiry_days
            )
            invite = await self.invite_service.create_invite(
                email=email,
                org_id=org_id,
                role=Role(request.role),
                invited_by=UserId(request.inviter_id),
                expires_at=expires_at,
                invite_token=InviteToken(root=secrets.token_urlsafe(32)),
            )

            return CreateInviteResponse(
                invite_id=invite.id,
                invite_token=invite.invite_token.root,
                expires_at=invite.expires_at,
            )
