"""SQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.model import Invite
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.value import InviteId, InviteStatus, InviteToken
from gatehouse.persistence.mappers import invite_to_dict, row_to_invite
from gatehouse.persistence.tables import invites_table


class SqlInviteRepository(InviteRepository):
    """SQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token.

        Args:
            token: Invite token to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.invite_token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_pending_by_email(
        self,
        email: str,
        expires_after: datetime | None = None,
        limit: int = 1,
    ) -> list[Invite]:
        """Find pending invites for an email, earliest first.

        Critical path for account creation - backed by the
        (email, status, created_at) index.

        Args:
            email: Invitee email
            expires_after: Only return invites expiring strictly after this
            limit: Maximum number of results

        Returns:
            Matching invites
        """
        stmt = (
            select(invites_table)
            .where(invites_table.c.email == email)
            .where(invites_table.c.status == InviteStatus.PENDING.value)
        )
        if expires_after is not None:
            stmt = stmt.where(invites_table.c.expires_at > expires_after)
        stmt = stmt.order_by(
            invites_table.c.created_at.asc(), invites_table.c.id.asc()
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def find_by_status(
        self, status: InviteStatus, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites with a given status.

        Args:
            status: Status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        stmt = (
            select(invites_table)
            .where(invites_table.c.status == status.value)
            .order_by(invites_table.c.created_at.asc(), invites_table.c.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        existing = await self.find_by_id(invite.id)

        invite_dict = invite_to_dict(invite)

        if existing:
            stmt = (
                invites_table.update()
                .where(invites_table.c.id == invite.id)
                .values(**invite_dict)
            )
        else:
            stmt = invites_table.insert().values(**invite_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invite
