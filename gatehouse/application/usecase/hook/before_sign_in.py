"""Sign-in re-validation (pre-sign-in hook)."""

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.hook.decision import HookDecision
from gatehouse.domain.error import AccountDeactivatedError, InvalidArgumentError
from gatehouse.domain.model import MemberClaims, SuperAdminClaims
from gatehouse.domain.service import UserService
from gatehouse.domain.value import UserId


class BeforeSignInRequest(BaseModel):
    """Sign-in attempt as presented by the identity platform."""

    uid: str | None = None
    email: str | None = None


class BeforeSignInUseCase(BaseUseCase):
    """Recompute an identity's authoritative claims on every sign-in.

    Read-only: the result depends only on the user record as it is now,
    never on the claims already cached on the credential. This is how role
    changes and deactivations reach an identity after the fact.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize before-sign-in use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: BeforeSignInRequest) -> HookDecision:
        """Re-validate a sign-in.

        Steps:
        1. No user record -> approve with no claims. The identity was approved
           at creation and its record has not been materialized yet.
        2. Super-role record -> super admin claims
        3. Record with member role and organization -> fresh member claims
        4. Record without role or organization -> rejected as deactivated

        Args:
            request: Identity uid and email

        Returns:
            Claims that are authoritative now

        Raises:
            InvalidArgumentError: If uid or email is missing
            AccountDeactivatedError: If the record no longer binds a role
        """
        uid = (request.uid or "").strip()
        email = (request.email or "").strip()
        if not uid or not email:
            raise InvalidArgumentError("Email is required.")

        user_id = UserId(uid)
        with logfire.span("before_sign_in.execute", user_id=user_id, email=email):
            user = await self.user_service.find_by_id(user_id)

            if user is None:
                logfire.info("Sign-in approved before materialization", user_id=user_id)
                return HookDecision(claims=None)

            if user.is_super_admin:
                logfire.info("Sign-in approved for super admin", user_id=user_id)
                return HookDecision(claims=SuperAdminClaims())

            if user.has_membership:
                logfire.info(
                    "Sign-in approved",
                    user_id=user_id,
                    org_id=user.org_id,
                    role=user.role.value,
                )
                return HookDecision(
                    claims=MemberClaims(role=user.role, org_id=user.org_id)
                )

            logfire.warn(
                "Sign-in rejected - account deactivated",
                user_id=user_id,
                role=user.role.value if user.role else None,
                org_id=user.org_id,
            )
            raise AccountDeactivatedError()
