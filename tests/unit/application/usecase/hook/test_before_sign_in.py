"""Unit tests for BeforeSignInUseCase."""

from dishka import AsyncContainer
import pytest

from gatehouse.application.usecase.hook import BeforeSignInRequest, BeforeSignInUseCase
from gatehouse.domain.error import AccountDeactivatedError, InvalidArgumentError
from gatehouse.domain.model import MemberClaims, SuperAdminClaims
from gatehouse.domain.value import Role
from gatehouse.persistence.repository.inmemory import InMemoryRecordStore
from tests.conftest import make_super_admin, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestBeforeSignInUseCase:
    """Tests for sign-in re-validation."""

    @pytest.mark.asyncio
    async def test_no_record_approves_with_empty_claims(self, unit_env: AsyncContainer):
        """An identity not yet materialized should sign in with no claims."""
        store = await unit_env.get(InMemoryRecordStore)
        use_case = await unit_env.get(BeforeSignInUseCase)

        decision = await use_case.execute(
            BeforeSignInRequest(uid="uid-new", email="new@x.com")
        )

        assert decision.claims is None
        assert decision.custom_claims == {}
        assert store.users == {}

    @pytest.mark.asyncio
    async def test_member_claims_refreshed_from_record(self, unit_env: AsyncContainer):
        """Claims should come from the record, not from whatever was cached."""
        store = await unit_env.get(InMemoryRecordStore)
        store.users["uid-1"] = make_user(user_id="uid-1", org_id="org1", role=Role.VIEWER)
        use_case = await unit_env.get(BeforeSignInUseCase)

        decision = await use_case.execute(
            BeforeSignInRequest(uid="uid-1", email="member@acme.com")
        )

        assert decision.claims == MemberClaims(role=Role.VIEWER, org_id="org1")

    @pytest.mark.asyncio
    async def test_super_admin_record(self, unit_env: AsyncContainer):
        """The super-role record should sign in with super admin claims."""
        store = await unit_env.get(InMemoryRecordStore)
        store.users["root-uid"] = make_super_admin()
        use_case = await unit_env.get(BeforeSignInUseCase)

        decision = await use_case.execute(
            BeforeSignInRequest(uid="root-uid", email="root@example.com")
        )

        assert decision.claims == SuperAdminClaims()

    @pytest.mark.asyncio
    async def test_cleared_role_rejected_as_deactivated(self, unit_env: AsyncContainer):
        """A record with an empty role should be rejected as deactivated."""
        store = await unit_env.get(InMemoryRecordStore)
        store.users["uid2"] = make_user(user_id="uid2", role=None)
        use_case = await unit_env.get(BeforeSignInUseCase)

        with pytest.raises(AccountDeactivatedError) as exc_info:
            await use_case.execute(BeforeSignInRequest(uid="uid2", email="member@acme.com"))

        assert exc_info.value.reason == "deactivated"
        assert "deactivated" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_missing_org_rejected_as_deactivated(self, unit_env: AsyncContainer):
        """A member record without an organization should be rejected."""
        store = await unit_env.get(InMemoryRecordStore)
        store.users["uid3"] = make_user(user_id="uid3", org_id=None, role=Role.USER)
        use_case = await unit_env.get(BeforeSignInUseCase)

        with pytest.raises(AccountDeactivatedError):
            await use_case.execute(BeforeSignInRequest(uid="uid3", email="member@acme.com"))

    @pytest.mark.asyncio
    async def test_missing_inputs_are_invalid(self, unit_env: AsyncContainer):
        """uid and email are both required."""
        use_case = await unit_env.get(BeforeSignInUseCase)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(BeforeSignInRequest(uid="uid-1", email=None))

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(BeforeSignInRequest(uid=None, email="a@x.com"))

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(BeforeSignInRequest(uid="uid-1", email="   "))

    @pytest.mark.asyncio
    async def test_padded_inputs_are_trimmed(self, unit_env: AsyncContainer):
        store = await unit_env.get(InMemoryRecordStore)
        store.users["uid-1"] = make_user(user_id="uid-1", role=Role.USER)
        use_case = await unit_env.get(BeforeSignInUseCase)

        decision = await use_case.execute(
            BeforeSignInRequest(uid=" uid-1 ", email=" member@acme.com ")
        )

        assert decision.claims == MemberClaims(role=Role.USER, org_id="org-1")
