"""Unit tests for UserService."""

import pytest

from gatehouse.domain.error import NotFoundError, PermissionDeniedError
from gatehouse.domain.repository import UserRepository
from gatehouse.domain.service import UserService
from gatehouse.domain.value import Role, UserId
from tests.conftest import make_super_admin, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        """get_by_id raises where find_by_id returns None."""
        user_service = await unit_env.get(UserService)

        assert await user_service.find_by_id(UserId("nobody")) is None
        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId("nobody"))

    @pytest.mark.asyncio
    async def test_find_super_admin_by_email(self, unit_env):
        """Only the super-role record matches, not a member with the same email."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(user_id="m", email="shared@x.com"))

        assert await user_service.find_super_admin_by_email("shared@x.com") is None

        await user_repo.save(make_super_admin(user_id="root", email="shared@x.com"))
        found = await user_service.find_super_admin_by_email("shared@x.com")
        assert found is not None and found.id == "root"

    @pytest.mark.asyncio
    async def test_update_role_changes_and_clears(self, unit_env):
        """Roles can be changed and cleared; updated_at moves forward."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        original = await user_repo.save(make_user(user_id="u1", role=Role.VIEWER))

        promoted = await user_service.update_role(UserId("u1"), Role.ADMIN)
        assert promoted.role == Role.ADMIN
        assert promoted.updated_at >= original.updated_at

        cleared = await user_service.update_role(UserId("u1"), None)
        assert cleared.role is None
        assert not cleared.has_membership

    @pytest.mark.asyncio
    async def test_update_role_refuses_super_admin(self, unit_env):
        """The super-role record is not changed through role updates."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_super_admin())

        with pytest.raises(PermissionDeniedError):
            await user_service.update_role(UserId("root-uid"), Role.USER)

        with pytest.raises(ValueError):
            await user_service.update_role(UserId("root-uid"), Role.SUPER_ADMIN)

    @pytest.mark.asyncio
    async def test_list_members(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(user_id="a", org_id="org-1"))
        await user_repo.save(make_user(user_id="b", org_id="org-2"))

        members = await user_service.list_members("org-1")

        assert [m.id for m in members] == ["a"]
