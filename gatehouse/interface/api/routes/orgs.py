"""Organization routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from gatehouse.application.usecase.organization import (
    CreateOrganizationRequest,
    CreateOrganizationResponse,
    CreateOrganizationUseCase,
    ListOrganizationsResponse,
    ListOrganizationsUseCase,
)
from gatehouse.domain.error import DomainError
from gatehouse.domain.service import JWTService
from gatehouse.interface.api.auth import require_super_admin
from gatehouse.interface.error import to_http_exception

router = APIRouter(prefix="/orgs", tags=["organizations"], route_class=DishkaRoute)


class CreateOrganizationAPIRequest(BaseModel):
    """API request for creating an organization."""

    name: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=100)


@router.get("", response_model=ListOrganizationsResponse)
async def list_organizations(
    list_organizations_use_case: FromDishka[ListOrganizationsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListOrganizationsResponse:
    """List all organizations (super admin only)."""
    require_super_admin(authorization, jwt_service)
    return await list_organizations_use_case.execute()


@router.post(
    "",
    response_model=CreateOrganizationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization(
    request: CreateOrganizationAPIRequest,
    create_organization_use_case: FromDishka[CreateOrganizationUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateOrganizationResponse:
    """Create an organization (super admin only).

    Example:
        POST /orgs
        {"name": "Acme", "slug": "acme"}

        Response:
        {"org_id": "6f1c..."}

    Raises:
        HTTPException: 400 on an invalid slug, 409 if the slug is taken
    """
    payload = require_super_admin(authorization, jwt_service)

    try:
        return await create_organization_use_case.execute(
            CreateOrganizationRequest(
                creator_id=payload.user_id,
                name=request.name,
                slug=request.slug,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
