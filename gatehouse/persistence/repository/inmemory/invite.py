"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from gatehouse.domain.model import Invite
from gatehouse.domain.repository import InviteRepository
from gatehouse.domain.value import InviteId, InviteStatus, InviteToken
from gatehouse.persistence.repository.inmemory.store import InMemoryRecordStore


def _ordered(invites: list[Invite]) -> list[Invite]:
    return sorted(invites, key=lambda i: (i.created_at, i.id))


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        return self._store.invites.get(invite_id)

    async def find_by_token(self, token: InviteToken) -> Optional[Invite]:
        """Find an invite by its token."""
        for invite in self._store.invites.values():
            if invite.invite_token == token:
                return invite
        return None

    async def find_pending_by_email(
        self,
        email: str,
        expires_after: datetime | None = None,
        limit: int = 1,
    ) -> list[Invite]:
        """Find pending invites for an email, earliest first."""
        matches = [
            invite
            for invite in self._store.invites.values()
            if invite.email == email
            and invite.status == InviteStatus.PENDING
            and (expires_after is None or invite.expires_at > expires_after)
        ]
        return _ordered(matches)[:limit]

    async def find_by_status(
        self, status: InviteStatus, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites with a given status."""
        matches = [i for i in self._store.invites.values() if i.status == status]
        return _ordered(matches)[offset : offset + limit]

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update)."""
        self._store.invites[invite.id] = invite
        return invite
