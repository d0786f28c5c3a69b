"""Membership materialization (post-creation hook)."""

from enum import Enum

import logfire
from pydantic import BaseModel

from gatehouse.application.usecase.base import BaseUseCase
from gatehouse.domain.error import MaterializationError
from gatehouse.domain.service import InviteService, MembershipService, UserService
from gatehouse.domain.value import UserId


class MaterializationOutcome(str, Enum):
    """What a post-creation run did."""

    MATERIALIZED = "materialized"
    SKIPPED_NO_UID = "skipped_no_uid"
    SKIPPED_NO_EMAIL = "skipped_no_email"
    ALREADY_MATERIALIZED = "already_materialized"
    NO_PENDING_INVITE = "no_pending_invite"


class AfterCreateRequest(BaseModel):
    """Newly created identity as reported by the identity platform."""

    uid: str
    email: str | None = None
    display_name: str | None = None
    photo_url: str | None = None


class AfterCreateResponse(BaseModel):
    """Post-creation result."""

    outcome: MaterializationOutcome


class AfterCreateUseCase(BaseUseCase):
    """Materialize the membership of a newly created identity.

    Runs once the identity already exists, so it never rejects: every path
    other than a failed commit is a successful no-op or a materialization.
    Idempotency is a re-check-then-atomic-write guard, not a lock: the user
    record is looked up first, and the atomic batch itself refuses to land
    twice.
    """

    def __init__(
        self,
        user_service: UserService,
        invite_service: InviteService,
        membership_service: MembershipService,
    ) -> None:
        """Initialize after-create use case.

        Args:
            user_service: User domain service
            invite_service: Invite domain service
            membership_service: Membership domain service
        """
        self.user_service = user_service
        self.invite_service = invite_service
        self.membership_service = membership_service

    async def execute(self, request: AfterCreateRequest) -> AfterCreateResponse:
        """Materialize membership for a new identity.

        Args:
            request: New identity's uid, email and profile

        Returns:
            Outcome of the run

        Raises:
            MaterializationError: If the atomic batch fails to commit
        """
        user_id = UserId(request.uid.strip())
        email = (request.email or "").strip()
        with logfire.span("after_create.execute", user_id=user_id, email=email):
            # The uid keys the user record; nothing can be materialized without it
            if not user_id:
                logfire.warn("Materialization skipped - no uid", email=email)
                return AfterCreateResponse(outcome=MaterializationOutcome.SKIPPED_NO_UID)

            if not email:
                logfire.warn("Materialization skipped - no email", user_id=user_id)
                return AfterCreateResponse(outcome=MaterializationOutcome.SKIPPED_NO_EMAIL)

            # Covers duplicate delivery and the bootstrapped super admin
            if await self.user_service.find_by_id(user_id):
                logfire.info("Materialization skipped - record exists", user_id=user_id)
                return AfterCreateResponse(
                    outcome=MaterializationOutcome.ALREADY_MATERIALIZED
                )

            # Expiry is not re-checked: creation was already approved
            invite = await self.invite_service.find_pending_invite_for_email(email)
            if not invite:
                logfire.warn(
                    "Materialization skipped - no pending invite",
                    user_id=user_id,
                    email=email,
                )
                return AfterCreateResponse(
                    outcome=MaterializationOutcome.NO_PENDING_INVITE
                )

            try:
                await self.membership_service.materialize(
                    user_id=user_id,
                    email=email,
                    display_name=request.display_name,
                    photo_url=request.photo_url,
                    invite=invite,
                )
            except Exception as e:
                logfire.error(
                    "Materialization failed",
                    user_id=user_id,
                    invite_id=invite.id,
                    org_id=invite.org_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise MaterializationError(user_id, e) from e

            return AfterCreateResponse(outcome=MaterializationOutcome.MATERIALIZED)
