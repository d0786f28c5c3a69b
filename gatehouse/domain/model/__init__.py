"""Domain models for gatehouse."""

from gatehouse.domain.model.claims import (
    ClaimsSet,
    MemberClaims,
    SuperAdminClaims,
    parse_claims,
    parse_optional_claims,
    satisfies_role,
    to_custom_claims,
)
from gatehouse.domain.model.identity import Identity
from gatehouse.domain.model.invite import Invite
from gatehouse.domain.model.organization import Organization
from gatehouse.domain.model.user import User, utcnow

__all__ = [
    "ClaimsSet",
    "Identity",
    "Invite",
    "MemberClaims",
    "Organization",
    "SuperAdminClaims",
    "User",
    "parse_claims",
    "parse_optional_claims",
    "satisfies_role",
    "to_custom_claims",
    "utcnow",
]
