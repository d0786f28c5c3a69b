"""In-memory write batches for testing.

Staged operations are applied to copies of the store's collections, which
replace the originals only when every operation succeeded.
"""

from collections.abc import Callable

from gatehouse.domain.error import ConflictError, NotFoundError
from gatehouse.domain.model import Invite, Organization, User
from gatehouse.domain.repository import BatchWriter, WriteBatch
from gatehouse.domain.value import InviteId, InviteStatus, OrgId, UserId
from gatehouse.persistence.repository.inmemory.store import InMemoryRecordStore


class _Snapshot:
    def __init__(self, store: InMemoryRecordStore) -> None:
        self.users: dict[UserId, User] = dict(store.users)
        self.invites: dict[InviteId, Invite] = dict(store.invites)
        self.organizations: dict[OrgId, Organization] = dict(store.organizations)


StagedOperation = Callable[[_Snapshot], None]


class InMemoryWriteBatch(WriteBatch):
    """All-or-nothing batch over an InMemoryRecordStore."""

    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store
        self._operations: list[tuple[str, StagedOperation]] = []

    def create_user(self, user: User) -> "InMemoryWriteBatch":
        def op(snapshot: _Snapshot) -> None:
            if user.id in snapshot.users:
                raise ConflictError(f"User record already exists: {user.id}")
            snapshot.users[user.id] = user

        self._operations.append(("create_user", op))
        return self

    def update_user(self, user: User) -> "InMemoryWriteBatch":
        def op(snapshot: _Snapshot) -> None:
            if user.id not in snapshot.users:
                raise NotFoundError("User", user.id)
            snapshot.users[user.id] = user

        self._operations.append(("update_user", op))
        return self

    def accept_invite(self, invite_id: InviteId) -> "InMemoryWriteBatch":
        def op(snapshot: _Snapshot) -> None:
            invite = snapshot.invites.get(invite_id)
            if invite is None:
                raise NotFoundError("Invite", invite_id)
            if invite.status != InviteStatus.PENDING:
                raise ConflictError(f"Invite already accepted: {invite_id}")
            snapshot.invites[invite_id] = invite.model_copy(
                update={"status": InviteStatus.ACCEPTED}
            )

        self._operations.append(("accept_invite", op))
        return self

    def increment_member_count(
        self, org_id: OrgId, amount: int = 1
    ) -> "InMemoryWriteBatch":
        def op(snapshot: _Snapshot) -> None:
            organization = snapshot.organizations.get(org_id)
            if organization is None:
                raise NotFoundError("Organization", org_id)
            snapshot.organizations[org_id] = organization.model_copy(
                update={"member_count": organization.member_count + amount}
            )

        self._operations.append(("increment_member_count", op))
        return self

    async def commit(self) -> None:
        snapshot = _Snapshot(self._store)
        try:
            for name, op in self._operations:
                if self._store.fault_injector is not None:
                    self._store.fault_injector(name)
                op(snapshot)
        finally:
            self._operations.clear()

        self._store.users = snapshot.users
        self._store.invites = snapshot.invites
        self._store.organizations = snapshot.organizations


class InMemoryBatchWriter(BatchWriter):
    """Creates batches over a shared in-memory store."""

    def __init__(self, store: InMemoryRecordStore) -> None:
        self._store = store

    def batch(self) -> InMemoryWriteBatch:
        return InMemoryWriteBatch(self._store)
