"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from gatehouse.application.usecase.member import (
    UpdateMemberRoleRequest,
    UpdateMemberRoleResponse,
    UpdateMemberRoleUseCase,
)
from gatehouse.application.usecase.organization import (
    GetCurrentOrganizationResponse,
    GetCurrentOrganizationUseCase,
)
from gatehouse.domain.error import DomainError
from gatehouse.domain.service import JWTService
from gatehouse.interface.api.auth import require_super_admin, require_token
from gatehouse.interface.error import to_http_exception

router = APIRouter(tags=["users"], route_class=DishkaRoute)


class UpdateMemberRoleAPIRequest(BaseModel):
    """API request for changing a member's role; null deactivates."""

    role: str | None = None


@router.get("/user/org", response_model=GetCurrentOrganizationResponse)
async def get_current_organization(
    get_current_organization_use_case: FromDishka[GetCurrentOrganizationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCurrentOrganizationResponse:
    """Get the organization named by the caller's claims.

    Example:
        GET /user/org

        Response:
        {"org": {"id": "org-1", "name": "Acme", "slug": "acme"}}
    """
    payload = require_token(authorization, jwt_service)
    return await get_current_organization_use_case.execute(payload.claims)


@router.patch("/users/{uid}/role", response_model=UpdateMemberRoleResponse)
async def update_member_role(
    uid: str,
    request: UpdateMemberRoleAPIRequest,
    update_member_role_use_case: FromDishka[UpdateMemberRoleUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateMemberRoleResponse:
    """Change or clear a member's role (super admin only).

    Raises:
        HTTPException: 400 on an invalid role, 403 when targeting the
            super admin, 404 if the member has no record
    """
    require_super_admin(authorization, jwt_service)

    try:
        return await update_member_role_use_case.execute(
            UpdateMemberRoleRequest(user_id=uid, role=request.role)
        )
    except DomainError as e:
        raise to_http_exception(e)
