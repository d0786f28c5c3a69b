"""Test configuration and shared record builders."""

from datetime import datetime, timedelta
from uuid import uuid4

from gatehouse.config import Settings
from gatehouse.domain.model import Invite, Organization, User, utcnow
from gatehouse.domain.value import (
    InviteId,
    InviteStatus,
    InviteToken,
    OrgId,
    Role,
    Slug,
    UserId,
)


def make_organization(
    org_id: str = "org-1",
    name: str = "Acme",
    slug: str | None = None,
    member_count: int = 0,
) -> Organization:
    """Build an organization record."""
    return Organization(
        id=OrgId(org_id),
        name=name,
        slug=Slug(slug or org_id),
        created_by=UserId("root-uid"),
        member_count=member_count,
    )


def make_invite(
    email: str = "new@acme.com",
    org_id: str = "org-1",
    role: Role = Role.USER,
    status: InviteStatus = InviteStatus.PENDING,
    created_at: datetime | None = None,
    expires_at: datetime | None = None,
    invite_id: str | None = None,
) -> Invite:
    """Build an invite; unexpired and pending unless told otherwise."""
    created_at = created_at or utcnow()
    return Invite(
        id=InviteId(invite_id or str(uuid4())),
        email=email,
        org_id=OrgId(org_id),
        role=role,
        invited_by=UserId("root-uid"),
        invite_token=InviteToken(root=uuid4().hex),
        status=status,
        created_at=created_at,
        expires_at=expires_at or created_at + timedelta(days=7),
    )


def make_user(
    user_id: str = "uid-1",
    email: str = "member@acme.com",
    org_id: str | None = "org-1",
    role: Role | None = Role.USER,
) -> User:
    """Build a user record."""
    return User(
        id=UserId(user_id),
        email=email,
        org_id=OrgId(org_id) if org_id else None,
        role=role,
    )


def make_super_admin(
    user_id: str = "root-uid", email: str = "root@example.com"
) -> User:
    """Build the super-role user record."""
    return make_user(user_id=user_id, email=email, org_id=None, role=Role.SUPER_ADMIN)


def hook_headers(settings: Settings) -> dict[str, str]:
    """Headers the identity platform sends on every hook call."""
    return {"Authorization": f"Bearer {settings.auth.hook_secret}"}
