"""List pending invites use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from gatehouse.domain.model import utcnow
from gatehouse.domain.service import InviteService
from gatehouse.domain.value import InviteStatus, Role


class ListInvitesRequest(BaseModel):
    """Pagination for the pending invite listing."""

    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class InviteItem(BaseModel):
    """Invite in a listing."""

    id: str
    email: str
    org_id: str
    role: Role
    invited_by: str
    status: InviteStatus
    created_at: datetime
    expires_at: datetime
    expired: bool


class ListInvitesResponse(BaseModel):
    """Pending invites, earliest first."""

    invites: list[InviteItem]


class ListInvitesUseCase:
    """Use case for listing pending invites.

    Expired invites are still pending in storage; they are listed with
    ``expired`` set so an administrator can re-issue them.
    """

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """List pending invites."""
        invites = await self.invite_service.list_pending_invites(
            limit=request.limit, offset=request.offset
        )
        now = utcnow()
        return ListInvitesResponse(
            invites=[
                InviteItem(
                    id=invite.id,
                    email=invite.email,
                    org_id=invite.org_id,
                    role=invite.role,
                    invited_by=invite.invited_by,
                    status=invite.status,
                    created_at=invite.created_at,
                    expires_at=invite.expires_at,
                    expired=invite.is_expired(now),
                )
                for invite in invites
            ]
        )
