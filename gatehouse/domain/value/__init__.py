"""Domain value objects for gatehouse."""

from gatehouse.domain.value.identifiers import InviteId, OrgId, UserId
from gatehouse.domain.value.types import (
    MEMBER_ROLES,
    InviteStatus,
    InviteToken,
    Role,
    Slug,
)

__all__ = [
    # Identifiers
    "UserId",
    "OrgId",
    "InviteId",
    # Types
    "MEMBER_ROLES",
    "InviteStatus",
    "InviteToken",
    "Role",
    "Slug",
]
