"""Invite domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from gatehouse.domain.error import ConflictError
from gatehouse.domain.model.invite import Invite
from gatehouse.domain.model.user import utcnow
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.value import (
    InviteId,
    InviteStatus,
    InviteToken,
    OrgId,
    Role,
    UserId,
)

from .base import Service


class InviteService(Service):
    """Domain service for invite operations."""

    def __init__(self, invite_repository: InviteRepository) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
        """
        self.invite_repository = invite_repository

    async def create_invite(
        self,
        email: str,
        org_id: OrgId,
        role: Role,
        invited_by: UserId,
        expires_at: datetime,
        invite_token: InviteToken,
    ) -> Invite:
        """Create a new pending invite.

        Args:
            email: Invitee email
            org_id: Organization the invitee will join
            role: Member role the invitee will hold
            invited_by: Identity creating the invite
            expires_at: Instant after which the invite is unusable
            invite_token: Unique delivery token

        Returns:
            Created invite

        Raises:
            ConflictError: If a pending invite already exists for the email
        """
        with logfire.span(
            "invite_service.create_invite",
            email=email,
            org_id=org_id,
            role=role.value,
        ):
            existing = await self.invite_repository.find_pending_by_email(email)
            if existing:
                logfire.warn("Pending invite already exists", email=email)
                raise ConflictError("A pending invite already exists for this email")

            invite = Invite(
                id=InviteId(str(uuid4())),
                email=email,
                org_id=org_id,
                role=role,
                invited_by=invited_by,
                invite_token=invite_token,
                status=InviteStatus.PENDING,
                created_at=utcnow(),
                expires_at=expires_at,
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=saved.id,
                email=email,
                org_id=org_id,
                invited_by=invited_by,
            )
            return saved

    async def find_valid_invite_for_email(
        self, email: str, now: datetime | None = None
    ) -> Invite | None:
        """Find the invite that can approve an account creation for an email.

        Only pending invites whose expiry lies strictly after ``now`` count.
        When several match, the earliest created wins.

        Args:
            email: Candidate email
            now: Reference instant, defaults to the current time

        Returns:
            Usable invite if one exists, None otherwise
        """
        now = now or utcnow()
        with logfire.span("invite_service.find_valid_invite_for_email", email=email):
            invites = await self.invite_repository.find_pending_by_email(
                email, expires_after=now, limit=1
            )
            if not invites or not invites[0].is_usable(now):
                logfire.info("No valid invite", email=email)
                return None
            invite = invites[0]
            logfire.info(
                "Valid invite found",
                email=email,
                invite_id=invite.id,
                org_id=invite.org_id,
                role=invite.role.value,
            )
            return invite

    async def find_pending_invite_for_email(self, email: str) -> Invite | None:
        """Find the earliest pending invite for an email, ignoring expiry.

        Args:
            email: Invitee email

        Returns:
            Pending invite if one exists, None otherwise
        """
        with logfire.span("invite_service.find_pending_invite_for_email", email=email):
            invites = await self.invite_repository.find_pending_by_email(email, limit=1)
            return invites[0] if invites else None

    async def get_invite_by_token(self, token: InviteToken) -> Invite | None:
        """Get invite by delivery token.

        Args:
            token: Invite token

        Returns:
            Invite if found, None otherwise
        """
        with logfire.span(
            "invite_service.get_invite_by_token", token=token.root[:8] + "..."
        ):
            invite = await self.invite_repository.find_by_token(token)
            if not invite:
                logfire.warn("Invite not found", token=token.root[:8] + "...")
            return invite

    async def list_pending_invites(
        self, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List pending invites, earliest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of pending invites
        """
        with logfire.span(
            "invite_service.list_pending_invites", limit=limit, offset=offset
        ):
            invites = await self.invite_repository.find_by_status(
                InviteStatus.PENDING, limit, offset
            )
            logfire.info("Pending invites listed", count=len(invites))
            return invites
