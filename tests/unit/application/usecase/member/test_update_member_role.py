"""Unit tests for UpdateMemberRoleUseCase."""

import pytest

from gatehouse.application.usecase.member import (
    UpdateMemberRoleRequest,
    UpdateMemberRoleUseCase,
)
from gatehouse.domain.error import NotFoundError, PermissionDeniedError, ValidationError
from gatehouse.domain.repository import UserRepository
from gatehouse.domain.service import IdentityClient
from gatehouse.domain.value import Role, UserId
from tests.conftest import make_super_admin, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestUpdateMemberRole:
    """Tests for UpdateMemberRoleUseCase."""

    @pytest.mark.asyncio
    async def test_changes_role_and_revokes_sessions(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        client = await unit_env.get(IdentityClient)
        await user_repo.save(make_user(user_id="u1", role=Role.VIEWER))
        use_case = await unit_env.get(UpdateMemberRoleUseCase)

        response = await use_case.execute(UpdateMemberRoleRequest(user_id="u1", role="admin"))

        assert response.role == Role.ADMIN
        assert response.org_id == "org-1"
        assert response.sessions_revoked is True
        assert client.revoked == ["u1"]
        assert (await user_repo.find_by_id(UserId("u1"))).role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_clearing_role_deactivates(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(user_id="u1"))
        use_case = await unit_env.get(UpdateMemberRoleUseCase)

        response = await use_case.execute(UpdateMemberRoleRequest(user_id="u1", role=None))

        assert response.role is None
        stored = await user_repo.find_by_id(UserId("u1"))
        assert stored.role is None
        assert stored.org_id == "org-1"

    @pytest.mark.asyncio
    async def test_failed_revocation_still_updates_record(self, unit_env):
        """Revocation failing only leaves old tokens alive until they expire."""
        user_repo = await unit_env.get(UserRepository)
        client = await unit_env.get(IdentityClient)
        client.fail_revocations = True
        await user_repo.save(make_user(user_id="u1"))
        use_case = await unit_env.get(UpdateMemberRoleUseCase)

        response = await use_case.execute(UpdateMemberRoleRequest(user_id="u1", role="viewer"))

        assert response.sessions_revoked is False
        assert (await user_repo.find_by_id(UserId("u1"))).role == Role.VIEWER

    @pytest.mark.asyncio
    async def test_rejects_super_role(self, unit_env):
        use_case = await unit_env.get(UpdateMemberRoleUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(UpdateMemberRoleRequest(user_id="u1", role="superAdmin"))

    @pytest.mark.asyncio
    async def test_unknown_member(self, unit_env):
        use_case = await unit_env.get(UpdateMemberRoleUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(UpdateMemberRoleRequest(user_id="ghost", role="user"))

    @pytest.mark.asyncio
    async def test_super_admin_record_untouchable(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        client = await unit_env.get(IdentityClient)
        await user_repo.save(make_super_admin())
        use_case = await unit_env.get(UpdateMemberRoleUseCase)

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(UpdateMemberRoleRequest(user_id="root-uid", role="user"))

        assert client.revoked == []
