"""Domain value objects for gatehouse.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from gatehouse.domain.value.common import RootValueObject


class Role(str, Enum):
    """Role hierarchy: viewer < user < admin < superAdmin.

    ``SUPER_ADMIN`` is only ever stored as the role sentinel on the super-role
    user record. It is never a member role and never appears as a ``role``
    claim; the super-role carries the ``superAdmin`` flag instead.
    """

    VIEWER = "viewer"
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"

    @property
    def rank(self) -> int:
        """Position in the hierarchy (higher is more privileged)."""
        return _ROLE_RANK[self]

    @property
    def is_member_role(self) -> bool:
        """Whether an invite or member claim may carry this role."""
        return self is not Role.SUPER_ADMIN


_ROLE_RANK = {
    Role.VIEWER: 0,
    Role.USER: 1,
    Role.ADMIN: 2,
    Role.SUPER_ADMIN: 3,
}

MEMBER_ROLES: tuple[Role, ...] = (Role.VIEWER, Role.USER, Role.ADMIN)


class InviteStatus(str, Enum):
    """Stored status of an invite.

    Expiry is an effective third state derived from ``expires_at``.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"


class InviteToken(RootValueObject[str]):
    """URL-safe invite delivery token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v


class Slug(RootValueObject[str]):
    """Globally unique organization slug.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'acme', 'north-wind-labs'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
