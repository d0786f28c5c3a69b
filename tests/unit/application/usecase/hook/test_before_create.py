"""Unit tests for BeforeCreateUseCase."""

from datetime import timedelta

from dishka import AsyncContainer
import pytest

from gatehouse.application.usecase.hook import BeforeCreateRequest, BeforeCreateUseCase
from gatehouse.domain.error import InvalidArgumentError, NotInvitedError
from gatehouse.domain.model import MemberClaims, SuperAdminClaims, utcnow
from gatehouse.domain.value import InviteStatus, Role
from gatehouse.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import make_invite, make_super_admin
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestBeforeCreateUseCase:
    """Tests for account-creation validation."""

    @pytest.mark.asyncio
    async def test_rejects_without_record_or_invite(self, unit_env: AsyncContainer):
        """No super-role record and no invite should reject as not invited."""
        use_case = await unit_env.get(BeforeCreateUseCase)

        with pytest.raises(NotInvitedError) as exc_info:
            await use_case.execute(BeforeCreateRequest(email="stranger@x.com"))

        assert exc_info.value.reason == "not_invited"
        assert str(exc_info.value) == "No valid invitation found for this email."

    @pytest.mark.asyncio
    async def test_missing_email_is_invalid_argument(self, unit_env: AsyncContainer):
        """A candidate without an email should be rejected as invalid."""
        use_case = await unit_env.get(BeforeCreateUseCase)

        with pytest.raises(InvalidArgumentError, match="Email is required."):
            await use_case.execute(BeforeCreateRequest(email=None))

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(BeforeCreateRequest(email="   "))

    @pytest.mark.asyncio
    async def test_super_admin_approved_regardless_of_invites(
        self, unit_env: AsyncContainer
    ):
        """A super-role record should approve with super admin claims."""
        store = await unit_env.get(InMemoryRecordStore)
        store.users["root-uid"] = make_super_admin(email="root@x.com")
        # An invite for the same email must not win over the super-role
        invite = make_invite(email="root@x.com", role=Role.ADMIN)
        store.invites[invite.id] = invite
        use_case = await unit_env.get(BeforeCreateUseCase)

        decision = await use_case.execute(BeforeCreateRequest(email="root@x.com"))

        assert decision.claims == SuperAdminClaims()
        assert decision.custom_claims == {"superAdmin": True}

    @pytest.mark.asyncio
    async def test_pending_invite_grants_member_claims(self, unit_env: AsyncContainer):
        """A pending unexpired invite should approve with its role and org."""
        store = await unit_env.get(InMemoryRecordStore)
        invite = make_invite(email="a@x.com", org_id="org1", role=Role.ADMIN)
        store.invites[invite.id] = invite
        use_case = await unit_env.get(BeforeCreateUseCase)

        decision = await use_case.execute(BeforeCreateRequest(email="a@x.com"))

        assert decision.claims == MemberClaims(role=Role.ADMIN, org_id="org1")
        assert decision.custom_claims == {"role": "admin", "orgId": "org1"}

    @pytest.mark.asyncio
    async def test_expired_invite_rejected(self, unit_env: AsyncContainer):
        """An invite whose expiry has passed should not approve creation."""
        store = await unit_env.get(InMemoryRecordStore)
        now = utcnow()
        invite = make_invite(
            email="b@x.com",
            created_at=now - timedelta(days=8),
            expires_at=now - timedelta(days=1),
        )
        store.invites[invite.id] = invite
        use_case = await unit_env.get(BeforeCreateUseCase)

        with pytest.raises(NotInvitedError):
            await use_case.execute(BeforeCreateRequest(email="b@x.com"))

    @pytest.mark.asyncio
    async def test_accepted_invite_rejected(self, unit_env: AsyncContainer):
        """A consumed invite should not approve a second account."""
        store = await unit_env.get(InMemoryRecordStore)
        invite = make_invite(email="c@x.com", status=InviteStatus.ACCEPTED)
        store.invites[invite.id] = invite
        use_case = await unit_env.get(BeforeCreateUseCase)

        with pytest.raises(NotInvitedError):
            await use_case.execute(BeforeCreateRequest(email="c@x.com"))

    @pytest.mark.asyncio
    async def test_earliest_invite_wins(self, unit_env: AsyncContainer):
        """With several pending invites the earliest created decides."""
        store = await unit_env.get(InMemoryRecordStore)
        now = utcnow()
        later = make_invite(
            email="d@x.com", org_id="org-b", role=Role.ADMIN, created_at=now
        )
        earlier = make_invite(
            email="d@x.com",
            org_id="org-a",
            role=Role.VIEWER,
            created_at=now - timedelta(hours=1),
        )
        store.invites[later.id] = later
        store.invites[earlier.id] = earlier
        use_case = await unit_env.get(BeforeCreateUseCase)

        decision = await use_case.execute(BeforeCreateRequest(email="d@x.com"))

        assert decision.claims == MemberClaims(role=Role.VIEWER, org_id="org-a")

    @pytest.mark.asyncio
    async def test_does_not_write(self, unit_env: AsyncContainer):
        """Validation should leave every record untouched."""
        store = await unit_env.get(InMemoryRecordStore)
        invite = make_invite(email="e@x.com")
        store.invites[invite.id] = invite
        use_case = await unit_env.get(BeforeCreateUseCase)

        await use_case.execute(BeforeCreateRequest(email="e@x.com"))

        assert store.users == {}
        assert store.invites[invite.id].status == InviteStatus.PENDING
