"""Integration tests for the SQL repositories and write batch.

Runs the production tables on an in-memory SQLite database, so the SQL the
repositories emit is exercised without a running PostgreSQL.
"""

from datetime import timedelta

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from gatehouse.application.usecase.member import (
    UpdateMemberRoleRequest,
    UpdateMemberRoleUseCase,
)
from gatehouse.domain.error import ConflictError, NotFoundError
from gatehouse.domain.model import utcnow
from gatehouse.domain.service import IdentityClient, IdentityService, UserService
from gatehouse.domain.value import InviteStatus, OrgId, Role, Slug, UserId
from gatehouse.persistence.database import create_session_factory
from gatehouse.persistence.repository import (
    SqlBatchWriter,
    SqlInviteRepository,
    SqlOrganizationRepository,
    SqlUserRepository,
)
from gatehouse.persistence.tables import metadata
from tests.conftest import make_invite, make_organization, make_super_admin, make_user


@pytest_asyncio.fixture
async def session():
    """Session on a fresh in-memory database with the full schema."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    async with create_session_factory(engine)() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def organization(session):
    return await SqlOrganizationRepository(session).save(make_organization(member_count=1))


class TestSqlUserRepository:
    """Tests for SqlUserRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, session, organization):
        repo = SqlUserRepository(session)
        user = make_user(role=Role.ADMIN)

        await repo.save(user)
        found = await repo.find_by_id(user.id)

        assert found == user
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_clears_role(self, session, organization):
        repo = SqlUserRepository(session)
        user = await repo.save(make_user())

        await repo.save(user.model_copy(update={"role": None}))

        assert (await repo.find_by_id(user.id)).role is None

    @pytest.mark.asyncio
    async def test_find_by_email_and_role(self, session, organization):
        repo = SqlUserRepository(session)
        await repo.save(make_user(user_id="member", email="shared@x.com"))
        await repo.save(make_super_admin(user_id="root", email="shared@x.com"))

        found = await repo.find_by_email_and_role("shared@x.com", Role.SUPER_ADMIN)

        assert found.id == "root"
        assert found.org_id is None
        assert await repo.find_by_email_and_role("other@x.com", Role.SUPER_ADMIN) is None

    @pytest.mark.asyncio
    async def test_find_by_org(self, session, organization):
        repo = SqlUserRepository(session)
        await repo.save(make_user(user_id="a"))
        await repo.save(make_super_admin())

        members = await repo.find_by_org(OrgId("org-1"))

        assert [m.id for m in members] == ["a"]


class TestSqlInviteRepository:
    """Tests for SqlInviteRepository."""

    @pytest.mark.asyncio
    async def test_find_by_token_uses_root_value(self, session, organization):
        repo = SqlInviteRepository(session)
        invite = await repo.save(make_invite())

        assert await repo.find_by_token(invite.invite_token) == invite

    @pytest.mark.asyncio
    async def test_pending_by_email_earliest_first_and_unexpired(self, session, organization):
        repo = SqlInviteRepository(session)
        now = utcnow()
        expired = await repo.save(
            make_invite(
                email="a@x.com",
                created_at=now - timedelta(days=9),
                expires_at=now - timedelta(days=2),
            )
        )
        older = await repo.save(
            make_invite(email="a@x.com", created_at=now - timedelta(hours=2))
        )
        await repo.save(make_invite(email="a@x.com", created_at=now - timedelta(hours=1)))
        await repo.save(
            make_invite(email="a@x.com", status=InviteStatus.ACCEPTED, created_at=now - timedelta(days=20))
        )

        valid = await repo.find_pending_by_email("a@x.com", expires_after=now, limit=1)
        any_pending = await repo.find_pending_by_email("a@x.com", limit=10)

        assert [i.id for i in valid] == [older.id]
        assert any_pending[0].id == expired.id
        assert len(any_pending) == 3

    @pytest.mark.asyncio
    async def test_find_by_status_paginates(self, session, organization):
        repo = SqlInviteRepository(session)
        now = utcnow()
        for n in range(3):
            await repo.save(
                make_invite(email=f"{n}@x.com", created_at=now + timedelta(seconds=n))
            )

        page = await repo.find_by_status(InviteStatus.PENDING, limit=2, offset=1)

        assert [i.email for i in page] == ["1@x.com", "2@x.com"]


class TestSqlOrganizationRepository:
    """Tests for SqlOrganizationRepository."""

    @pytest.mark.asyncio
    async def test_find_by_slug_and_list(self, session):
        repo = SqlOrganizationRepository(session)
        await repo.save(make_organization(org_id="org-z", name="Zeta"))
        await repo.save(make_organization(org_id="org-a", name="Alpha"))

        found = await repo.find_by_slug(Slug("org-z"))
        listed = await repo.list_all()

        assert found.name == "Zeta"
        assert [o.name for o in listed] == ["Alpha", "Zeta"]

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_member_count(self, session, organization):
        repo = SqlOrganizationRepository(session)

        await repo.save(organization.model_copy(update={"name": "Renamed", "member_count": 99}))

        stored = await repo.find_by_id(organization.id)
        assert stored.name == "Renamed"
        assert stored.member_count == 1


class TestSqlWriteBatch:
    """Tests for SqlWriteBatch."""

    @pytest.mark.asyncio
    async def test_commit_applies_all_three(self, session, organization):
        invite = await SqlInviteRepository(session).save(make_invite())
        await session.commit()
        user = make_user(user_id="uid-9")

        await (
            SqlBatchWriter(session)
            .batch()
            .create_user(user)
            .accept_invite(invite.id)
            .increment_member_count(organization.id)
            .commit()
        )

        assert await SqlUserRepository(session).find_by_id(UserId("uid-9")) == user
        stored_invite = await SqlInviteRepository(session).find_by_id(invite.id)
        assert stored_invite.status == InviteStatus.ACCEPTED
        stored_org = await SqlOrganizationRepository(session).find_by_id(organization.id)
        assert stored_org.member_count == 2

    @pytest.mark.asyncio
    async def test_missing_org_rolls_back_everything(self, session, organization):
        invite = await SqlInviteRepository(session).save(make_invite())
        await session.commit()

        with pytest.raises(NotFoundError):
            await (
                SqlBatchWriter(session)
                .batch()
                .create_user(make_user(user_id="uid-9"))
                .accept_invite(invite.id)
                .increment_member_count(OrgId("missing"))
                .commit()
            )

        assert await SqlUserRepository(session).find_by_id(UserId("uid-9")) is None
        stored_invite = await SqlInviteRepository(session).find_by_id(invite.id)
        assert stored_invite.status == InviteStatus.PENDING

    @pytest.mark.asyncio
    async def test_consumed_invite_conflicts(self, session, organization):
        invite = await SqlInviteRepository(session).save(
            make_invite(status=InviteStatus.ACCEPTED)
        )
        await session.commit()

        with pytest.raises(ConflictError):
            await (
                SqlBatchWriter(session)
                .batch()
                .create_user(make_user(user_id="uid-9"))
                .accept_invite(invite.id)
                .commit()
            )

        assert await SqlUserRepository(session).find_by_id(UserId("uid-9")) is None

    @pytest.mark.asyncio
    async def test_existing_user_conflicts(self, session, organization):
        await SqlUserRepository(session).save(make_user(user_id="uid-9"))
        await session.commit()

        with pytest.raises(ConflictError):
            await SqlBatchWriter(session).batch().create_user(make_user(user_id="uid-9")).commit()

    @pytest.mark.asyncio
    async def test_missing_invite_not_found(self, session, organization):
        with pytest.raises(NotFoundError):
            await SqlBatchWriter(session).batch().accept_invite("nope").commit()

    @pytest.mark.asyncio
    async def test_update_user_replaces_record(self, session, organization):
        user = await SqlUserRepository(session).save(make_user(user_id="uid-9"))
        await session.commit()

        await (
            SqlBatchWriter(session)
            .batch()
            .update_user(user.model_copy(update={"role": Role.VIEWER}))
            .commit()
        )

        await session.rollback()
        assert (await SqlUserRepository(session).find_by_id(UserId("uid-9"))).role == Role.VIEWER

    @pytest.mark.asyncio
    async def test_update_missing_user_not_found(self, session, organization):
        with pytest.raises(NotFoundError):
            await SqlBatchWriter(session).batch().update_user(make_user(user_id="ghost")).commit()


class RoleAtRevocationClient(IdentityClient):
    """Reads back the member's role the moment sessions are revoked.

    Rolling back first discards anything the session has not committed, so
    the role seen is the one a sign-in on another connection would read.
    """

    def __init__(self, session) -> None:
        self.session = session
        self.roles: list[Role | None] = []

    async def revoke_refresh_tokens(self, uid: UserId) -> None:
        await self.session.rollback()
        user = await SqlUserRepository(self.session).find_by_id(uid)
        self.roles.append(user.role)


class TestRoleChangeOrdering:
    """A role change is durable before the member's sessions are revoked."""

    @pytest.mark.asyncio
    async def test_role_committed_before_revocation(self, session, organization):
        await SqlUserRepository(session).save(make_user(user_id="uid-2", role=Role.ADMIN))
        await session.commit()
        identity_client = RoleAtRevocationClient(session)
        use_case = UpdateMemberRoleUseCase(
            user_service=UserService(
                user_repository=SqlUserRepository(session),
                batch_writer=SqlBatchWriter(session),
            ),
            identity_service=IdentityService(identity_client=identity_client),
        )

        response = await use_case.execute(UpdateMemberRoleRequest(user_id="uid-2", role=None))

        assert response.sessions_revoked
        assert identity_client.roles == [None]
