"""Tests for the route authentication helpers."""

import pytest
from fastapi import HTTPException

from gatehouse.config import AuthSettings
from gatehouse.domain.model import MemberClaims, SuperAdminClaims
from gatehouse.domain.service import JWTService
from gatehouse.domain.value import Role
from gatehouse.interface.api.auth import require_role, require_super_admin
from gatehouse.util.jwt import create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _header(unit_env, claims):
    settings = await unit_env.get(AuthSettings)
    return f"Bearer {create_token('uid-1', 'member@acme.com', claims, settings)}"


class TestRequireRole:
    """Tests for require_role."""

    @pytest.mark.asyncio
    async def test_higher_member_role_passes(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        header = await _header(unit_env, MemberClaims(role=Role.ADMIN, org_id="org-1"))

        payload = require_role(header, jwt_service, Role.USER)

        assert payload.claims.role == Role.ADMIN

    @pytest.mark.asyncio
    async def test_lower_member_role_forbidden(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        header = await _header(unit_env, MemberClaims(role=Role.VIEWER, org_id="org-1"))

        with pytest.raises(HTTPException) as exc_info:
            require_role(header, jwt_service, Role.USER)

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_super_admin_passes_member_checks(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        header = await _header(unit_env, SuperAdminClaims())

        assert require_role(header, jwt_service, Role.ADMIN).claims == SuperAdminClaims()

    @pytest.mark.asyncio
    async def test_member_admin_is_not_super_admin(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        header = await _header(unit_env, MemberClaims(role=Role.ADMIN, org_id="org-1"))

        with pytest.raises(HTTPException) as exc_info:
            require_super_admin(header, jwt_service)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Super admin access required"

    @pytest.mark.asyncio
    async def test_missing_token_unauthenticated(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(HTTPException) as exc_info:
            require_role(None, jwt_service, Role.VIEWER)

        assert exc_info.value.status_code == 401
