"""Blocking lifecycle hook routes.

The identity platform calls these synchronously while an identity is being
created or is signing in. Approvals attach claims to the identity; a
rejection aborts the operation and its message is shown to the end user.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from gatehouse.application.usecase.hook import (
    AfterCreateRequest,
    AfterCreateUseCase,
    BeforeCreateRequest,
    BeforeCreateUseCase,
    BeforeSignInRequest,
    BeforeSignInUseCase,
    HookDecision,
)
from gatehouse.config import Settings
from gatehouse.domain.error import (
    InvalidArgumentError,
    MaterializationError,
    PermissionDeniedError,
)
from gatehouse.interface.api.auth import verify_hook_secret

router = APIRouter(prefix="/hooks", tags=["hooks"], route_class=DishkaRoute)


class HookUserData(BaseModel):
    """Identity fields forwarded by the platform."""

    model_config = ConfigDict(populate_by_name=True)

    uid: str | None = None
    email: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    photo_url: str | None = Field(default=None, alias="photoURL")


class HookAPIRequest(BaseModel):
    """Envelope of a lifecycle hook call."""

    data: HookUserData = Field(default_factory=HookUserData)


def approve(decision: HookDecision) -> dict[str, Any]:
    """Build the approval body; empty claims leave the identity untouched."""
    claims = decision.custom_claims
    if not claims:
        return {}
    return {"userRecord": {"customClaims": claims, "updateMask": "customClaims"}}


def reject(error: InvalidArgumentError | PermissionDeniedError) -> JSONResponse:
    """Build the rejection body the platform surfaces to the end user."""
    if isinstance(error, PermissionDeniedError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={
                "error": {
                    "status": "PERMISSION_DENIED",
                    "message": str(error),
                    "reason": error.reason,
                }
            },
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": {"status": "INVALID_ARGUMENT", "message": str(error)}},
    )


@router.post("/before-create")
async def before_create(
    request: HookAPIRequest,
    settings: FromDishka[Settings],
    before_create_use_case: FromDishka[BeforeCreateUseCase],
    authorization: str | None = Header(default=None),
) -> Any:
    """Validate that a new identity was invited.

    Example:
        POST /hooks/before-create
        {"data": {"email": "new@acme.com"}}

        Response:
        {"userRecord": {"customClaims": {"role": "user", "orgId": "org-1"},
                        "updateMask": "customClaims"}}
    """
    verify_hook_secret(authorization, settings)

    try:
        decision = await before_create_use_case.execute(
            BeforeCreateRequest(email=request.data.email)
        )
    except (InvalidArgumentError, PermissionDeniedError) as e:
        return reject(e)

    return approve(decision)


@router.post("/before-sign-in")
async def before_sign_in(
    request: HookAPIRequest,
    settings: FromDishka[Settings],
    before_sign_in_use_case: FromDishka[BeforeSignInUseCase],
    authorization: str | None = Header(default=None),
) -> Any:
    """Re-validate an identity's membership at every sign-in."""
    verify_hook_secret(authorization, settings)

    try:
        decision = await before_sign_in_use_case.execute(
            BeforeSignInRequest(uid=request.data.uid, email=request.data.email)
        )
    except (InvalidArgumentError, PermissionDeniedError) as e:
        return reject(e)

    return approve(decision)


@router.post("/after-create")
async def after_create(
    request: HookAPIRequest,
    settings: FromDishka[Settings],
    after_create_use_case: FromDishka[AfterCreateUseCase],
    authorization: str | None = Header(default=None),
) -> Any:
    """Materialize the membership of a freshly created identity.

    Non-blocking from the identity's point of view: a failure is reported
    to the platform but the identity already exists.
    """
    verify_hook_secret(authorization, settings)

    try:
        response = await after_create_use_case.execute(
            AfterCreateRequest(
                uid=request.data.uid or "",
                email=request.data.email,
                display_name=request.data.display_name,
                photo_url=request.data.photo_url,
            )
        )
    except MaterializationError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"status": "INTERNAL", "message": str(e)}},
        )

    return {"outcome": response.outcome.value}
