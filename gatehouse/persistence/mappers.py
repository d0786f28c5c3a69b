"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from gatehouse.domain.model import Invite, Organization, User
from gatehouse.domain.value import (
    InviteId,
    InviteStatus,
    InviteToken,
    OrgId,
    Role,
    Slug,
    UserId,
)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps (SQLite drops the offset on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    An empty role is stored the same as a missing one: deactivated.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        display_name=row.get("display_name") or "",
        photo_url=row.get("photo_url") or "",
        org_id=OrgId(row["org_id"]) if row.get("org_id") else None,
        role=Role(row["role"]) if row.get("role") else None,
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "email": user.email,
        "display_name": user.display_name,
        "photo_url": user.photo_url,
        "org_id": user.org_id,
        "role": user.role.value if user.role else None,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(row["id"]),
        email=row["email"],
        org_id=OrgId(row["org_id"]),
        role=Role(row["role"]),
        invited_by=UserId(row["invited_by"]),
        invite_token=InviteToken(root=row["invite_token"]),
        status=InviteStatus(row["status"]),
        created_at=as_utc(row["created_at"]),
        expires_at=as_utc(row["expires_at"]),
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": invite.id,
        "email": invite.email,
        "org_id": invite.org_id,
        "role": invite.role.value,
        "invited_by": invite.invited_by,
        "invite_token": invite.invite_token.root,
        "status": invite.status.value,
        "created_at": invite.created_at,
        "expires_at": invite.expires_at,
    }


def row_to_organization(row: Dict[str, Any]) -> Organization:
    """Convert database row to Organization domain model.

    Args:
        row: Database row as dict

    Returns:
        Organization domain model
    """
    return Organization(
        id=OrgId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        created_by=UserId(row["created_by"]),
        created_at=as_utc(row["created_at"]),
        member_count=row["member_count"],
    )


def organization_to_dict(organization: Organization) -> Dict[str, Any]:
    """Convert Organization domain model to database dict.

    Args:
        organization: Organization domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": organization.id,
        "name": organization.name,
        "slug": organization.slug.root,
        "created_by": organization.created_by,
        "created_at": organization.created_at,
        "member_count": organization.member_count,
    }
