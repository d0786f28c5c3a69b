"""Invite entity.

Invites are the only way an identity can come into existence. Each invite
targets one email and binds the future account to an organization and role.
"""

from datetime import datetime

from pydantic import Field, field_validator

from gatehouse.domain.model.common import DomainModel
from gatehouse.domain.model.user import utcnow
from gatehouse.domain.value import InviteId, InviteStatus, InviteToken, OrgId, Role, UserId


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - At most one pending invite per email (enforced on creation)
    - Role is a member role, never the super-role
    - Consumed exactly once: status moves pending -> accepted on materialization
    - Expired once ``expires_at`` passes, even though status stays pending
    """

    id: InviteId
    email: str
    org_id: OrgId
    role: Role
    invited_by: UserId
    invite_token: InviteToken
    status: InviteStatus = InviteStatus.PENDING
    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime

    @field_validator("role")
    @classmethod
    def validate_member_role(cls, v: Role) -> Role:
        """Invites never grant the super-role."""
        if not v.is_member_role:
            raise ValueError("Invites cannot grant the superAdmin role")
        return v

    def is_expired(self, now: datetime) -> bool:
        """Whether the invite's clock has run out."""
        return self.expires_at <= now

    def is_usable(self, now: datetime) -> bool:
        """Whether the invite can still approve an account creation."""
        return self.status == InviteStatus.PENDING and not self.is_expired(now)
