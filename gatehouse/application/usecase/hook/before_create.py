"""Account creation validation (pre-creation hook)."""

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.application.usecase.hook.decision import HookDecision
from gatehouse.domain.error import InvalidArgumentError, NotInvitedError
from gatehouse.domain.model import MemberClaims, SuperAdminClaims, utcnow
from gatehouse.domain.service import InviteService, UserService


class BeforeCreateRequest(BaseModel):
    """Candidate account as presented by the identity platform."""

    email: str | None = None


class BeforeCreateUseCase(BaseUseCase):
    """Decide whether an account may be created for an email.

    Runs before the identity provider persists anything. Performs no writes,
    so the platform may call it any number of times for the same candidate.
    """

    def __init__(self, user_service: UserService, invite_service: InviteService) -> None:
        """Initialize before-create use case.

        Args:
            user_service: User domain service
            invite_service: Invite domain service
        """
        self.user_service = user_service
        self.invite_service = invite_service

    async def execute(self, request: BeforeCreateRequest) -> HookDecision:
        """Validate a candidate account.

        Steps (first match wins):
        1. Super-role record exists for the email -> super admin claims
        2. Pending, unexpired invite exists -> member claims from the invite
        3. Otherwise -> rejected

        Args:
            request: Candidate email

        Returns:
            Claims to attach to the new identity

        Raises:
            InvalidArgumentError: If email is missing
            NotInvitedError: If there is no valid invitation
        """
        email = (request.email or "").strip()
        if not email:
            raise InvalidArgumentError("Email is required.")

        with logfire.span("before_create.execute", email=email):
            # The super-role can be recreated without an invite
            if await self.user_service.find_super_admin_by_email(email):
                logfire.info("Account creation approved for super admin", email=email)
                return HookDecision(claims=SuperAdminClaims())

            invite = await self.invite_service.find_valid_invite_for_email(
                email, now=utcnow()
            )
            if not invite:
                logfire.warn("Account creation rejected - no valid invite", email=email)
                raise NotInvitedError()

            logfire.info(
                "Account creation approved",
                email=email,
                invite_id=invite.id,
                org_id=invite.org_id,
                role=invite.role.value,
            )
            return HookDecision(
                claims=MemberClaims(role=invite.role, org_id=invite.org_id)
            )
