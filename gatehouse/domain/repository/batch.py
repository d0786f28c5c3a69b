"""Atomic write batch interface.

A batch stages several record-store mutations and commits them as one
all-or-nothing unit. It is the only way a user record, the consumption of its
invite and the organization's member count change together.
"""

from abc import ABC, abstractmethod

from gatehouse.domain.model.user import User
from gatehouse.domain.value import InviteId, OrgId


class WriteBatch(ABC):
    """A staged set of mutations.

    Staging methods never touch the store. ``commit`` applies every staged
    mutation or none of them, and fails (raising) when any precondition does
    not hold at commit time:

    - ``create_user``: no record exists yet for the user's id
    - ``update_user``: a record already exists for the user's id
    - ``accept_invite``: the invite exists and is still pending
    - ``increment_member_count``: the organization exists
    """

    @abstractmethod
    def create_user(self, user: User) -> "WriteBatch":
        """Stage creation of a user record."""
        pass

    @abstractmethod
    def update_user(self, user: User) -> "WriteBatch":
        """Stage replacement of an existing user record."""
        pass

    @abstractmethod
    def accept_invite(self, invite_id: InviteId) -> "WriteBatch":
        """Stage the pending -> accepted transition of an invite."""
        pass

    @abstractmethod
    def increment_member_count(self, org_id: OrgId, amount: int = 1) -> "WriteBatch":
        """Stage a numeric increment of an organization's member count."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Apply all staged mutations atomically.

        Raises:
            ConflictError: If a precondition no longer holds
            NotFoundError: If a referenced record does not exist
        """
        pass


class BatchWriter(ABC):
    """Factory for write batches bound to the current record-store session."""

    @abstractmethod
    def batch(self) -> WriteBatch:
        """Start a new, empty write batch."""
        pass
