"""User record.

One record per identity, keyed by the identity provider's uid. The record is
the durable source of truth for an identity's role and organization; claims
cached in tokens mirror it once refreshed.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from gatehouse.domain.model.common import DomainModel
from gatehouse.domain.value import OrgId, Role, UserId


def utcnow() -> datetime:
    """Timezone-aware current time used for all record timestamps."""
    return datetime.now(timezone.utc)


class User(DomainModel):
    """User record.

    Business rules:
    - ``org_id`` is None only for the super-role record
    - ``role`` is the ``superAdmin`` sentinel for the super-role record
    - ``role`` is None for an administratively deactivated member
    """

    id: UserId
    email: str
    display_name: str = ""
    photo_url: str = ""
    org_id: Optional[OrgId] = None
    role: Optional[Role] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_super_admin(self) -> bool:
        """Whether this is the super-role record."""
        return self.role is Role.SUPER_ADMIN

    @property
    def has_membership(self) -> bool:
        """Whether the record binds a member role to an organization."""
        return self.role is not None and self.role.is_member_role and bool(self.org_id)
