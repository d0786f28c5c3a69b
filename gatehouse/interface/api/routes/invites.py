"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, ConfigDict, Field

from gatehouse.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from gatehouse.domain.error import DomainError
from gatehouse.domain.service import JWTService
from gatehouse.interface.api.auth import require_super_admin
from gatehouse.interface.error import to_http_exception

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite.

    Fields are optional here so a missing one yields the same 400 message
    as an invalid one.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    org_id: str | None = Field(default=None, alias="orgId")
    role: str | None = None


@router.post(
    "", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateInviteResponse:
    """Invite an email into an organization (super admin only).

    Example:
        POST /invites
        {"email": "new@acme.com", "orgId": "org-1", "role": "user"}

    Raises:
        HTTPException: 400 on missing fields or invalid role, 404 if the
            organization does not exist, 409 if a pending invite exists
    """
    payload = require_super_admin(authorization, jwt_service)

    try:
        return await create_invite_use_case.execute(
            CreateInviteRequest(
                inviter_id=payload.user_id,
                email=request.email,
                org_id=request.org_id,
                role=request.role,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListInvitesResponse:
    """List pending invites, earliest first (super admin only)."""
    require_super_admin(authorization, jwt_service)
    return await list_invites_use_case.execute(
        ListInvitesRequest(limit=limit, offset=offset)
    )
