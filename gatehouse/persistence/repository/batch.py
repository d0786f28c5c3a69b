"""SQL implementation of atomic write batches.

Staged operations become statements executed inside the request's session
transaction and committed together. Any failed precondition rolls the whole
transaction back.
"""

from collections.abc import Awaitable, Callable

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.error import ConflictError, NotFoundError
from gatehouse.domain.model import User
from gatehouse.domain.repository import BatchWriter, WriteBatch
from gatehouse.domain.value import InviteId, InviteStatus, OrgId
from gatehouse.persistence.mappers import user_to_dict
from gatehouse.persistence.tables import invites_table, organizations_table, users_table

StagedOperation = Callable[[AsyncSession], Awaitable[None]]


class SqlWriteBatch(WriteBatch):
    """Write batch executed as a single SQL transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._operations: list[tuple[str, StagedOperation]] = []

    def create_user(self, user: User) -> "SqlWriteBatch":
        async def op(session: AsyncSession) -> None:
            existing = await session.execute(
                select(users_table.c.id).where(users_table.c.id == user.id)
            )
            if existing.first() is not None:
                raise ConflictError(f"User record already exists: {user.id}")
            await session.execute(users_table.insert().values(**user_to_dict(user)))

        self._operations.append(("create_user", op))
        return self

    def update_user(self, user: User) -> "SqlWriteBatch":
        async def op(session: AsyncSession) -> None:
            values = user_to_dict(user)
            values.pop("id")
            result = await session.execute(
                users_table.update().where(users_table.c.id == user.id).values(**values)
            )
            if result.rowcount != 1:
                raise NotFoundError("User", user.id)

        self._operations.append(("update_user", op))
        return self

    def accept_invite(self, invite_id: InviteId) -> "SqlWriteBatch":
        async def op(session: AsyncSession) -> None:
            # Conditional update: only a pending invite can be consumed
            result = await session.execute(
                invites_table.update()
                .where(invites_table.c.id == invite_id)
                .where(invites_table.c.status == InviteStatus.PENDING.value)
                .values(status=InviteStatus.ACCEPTED.value)
            )
            if result.rowcount == 1:
                return
            found = await session.execute(
                select(invites_table.c.id).where(invites_table.c.id == invite_id)
            )
            if found.first() is None:
                raise NotFoundError("Invite", invite_id)
            raise ConflictError(f"Invite already accepted: {invite_id}")

        self._operations.append(("accept_invite", op))
        return self

    def increment_member_count(
        self, org_id: OrgId, amount: int = 1
    ) -> "SqlWriteBatch":
        async def op(session: AsyncSession) -> None:
            result = await session.execute(
                organizations_table.update()
                .where(organizations_table.c.id == org_id)
                .values(member_count=organizations_table.c.member_count + amount)
            )
            if result.rowcount != 1:
                raise NotFoundError("Organization", org_id)

        self._operations.append(("increment_member_count", op))
        return self

    async def commit(self) -> None:
        """Execute every staged statement, then commit once.

        Raises:
            ConflictError: If a precondition no longer holds
            NotFoundError: If a referenced record does not exist
        """
        with logfire.span("sql_batch.commit", operations=len(self._operations)):
            try:
                for name, op in self._operations:
                    with logfire.span("sql_batch.{operation}", operation=name):
                        await op(self.session)
                await self.session.flush()
                await self.session.commit()
            except IntegrityError as e:
                await self.session.rollback()
                raise ConflictError(f"Batch violated a uniqueness rule: {e.orig}") from e
            except Exception:
                await self.session.rollback()
                raise
            finally:
                self._operations.clear()


class SqlBatchWriter(BatchWriter):
    """Creates write batches bound to the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def batch(self) -> SqlWriteBatch:
        return SqlWriteBatch(self.session)
