"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from gatehouse.domain.model.invite import Invite
from gatehouse.domain.value import InviteId, InviteStatus, InviteToken


class InviteRepository(ABC):
    """Repository for Invite entity.

    Query methods that return several invites order them by ``created_at``
    ascending, so the first element is a deterministic pick when more than
    one invite matches.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> Invite | None:
        """Find an invite by its delivery token.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_email(
        self,
        email: str,
        expires_after: datetime | None = None,
        limit: int = 1,
    ) -> list[Invite]:
        """Find pending invites for an email, earliest first.

        Args:
            email: Invitee email
            expires_after: When given, only invites with ``expires_at`` strictly
                later than this instant are returned
            limit: Maximum number of results

        Returns:
            Matching invites ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_by_status(
        self, status: InviteStatus, limit: int = 50, offset: int = 0
    ) -> list[Invite]:
        """List invites with a given status, earliest first.

        Args:
            status: Status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: The invite to save

        Returns:
            The saved invite
        """
        pass
