"""Membership domain service.

Owns the one multi-record write in the system: turning an approved identity
into a member by creating its user record, consuming its invite and counting
it in its organization, all in a single batch.
"""

import logfire

from gatehouse.domain.model import Invite, User, utcnow
from gatehouse.domain.repository import BatchWriter
from gatehouse.domain.value import UserId

from .base import Service


class MembershipService(Service):
    """Domain service for membership materialization."""

    def __init__(self, batch_writer: BatchWriter) -> None:
        """Initialize membership service.

        Args:
            batch_writer: Factory for atomic write batches
        """
        self.batch_writer = batch_writer

    async def materialize(
        self,
        user_id: UserId,
        email: str,
        display_name: str | None,
        photo_url: str | None,
        invite: Invite,
    ) -> User:
        """Create the member's record from its invite in one atomic batch.

        The batch creates the user record, moves the invite from pending to
        accepted and increments the organization's member count. Either all
        three land or none do. The batch itself refuses to commit when the
        record already exists or the invite is no longer pending, so a
        concurrent duplicate run fails instead of double counting.

        Args:
            user_id: New identity's uid
            email: New identity's email
            display_name: Display name from the provider, if any
            photo_url: Photo reference from the provider, if any
            invite: Pending invite the identity was approved with

        Returns:
            The created user record

        Raises:
            ConflictError: If the record exists or the invite was consumed
            NotFoundError: If the invite's organization does not exist
        """
        with logfire.span(
            "membership_service.materialize",
            user_id=user_id,
            invite_id=invite.id,
            org_id=invite.org_id,
        ):
            now = utcnow()
            user = User(
                id=user_id,
                email=email,
                display_name=display_name or "",
                photo_url=photo_url or "",
                org_id=invite.org_id,
                role=invite.role,
                created_at=now,
                updated_at=now,
            )

            batch = (
                self.batch_writer.batch()
                .create_user(user)
                .accept_invite(invite.id)
                .increment_member_count(invite.org_id, 1)
            )
            await batch.commit()

            logfire.info(
                "Membership materialized",
                user_id=user_id,
                invite_id=invite.id,
                org_id=invite.org_id,
                role=invite.role.value,
            )
            return user
