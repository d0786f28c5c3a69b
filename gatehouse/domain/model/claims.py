"""Claims contract.

A claims set is the authority an identity carries inside its signed session
credential. It is a closed union of exactly two shapes:

    SuperAdminClaims  {"superAdmin": true}
    MemberClaims      {"role": "viewer" | "user" | "admin", "orgId": "<org id>"}

Bags arriving from the outside world (token payloads, provider records) go
through ``parse_claims``, which either returns one of the two shapes or raises
``ClaimsFormatError``. Missing fields are never defaulted.
"""

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import Field, field_validator

from gatehouse.domain.error import ClaimsFormatError
from gatehouse.domain.value import OrgId, Role
from gatehouse.domain.value.common import ValueObject

CLAIM_KEYS = frozenset({"role", "orgId", "superAdmin"})


class SuperAdminClaims(ValueObject):
    """Claims of the single super-role identity. No organization, no role."""

    super_admin: Literal[True] = Field(default=True, alias="superAdmin")


class MemberClaims(ValueObject):
    """Claims of an organization member."""

    role: Role
    org_id: OrgId = Field(alias="orgId")

    @field_validator("role")
    @classmethod
    def validate_member_role(cls, v: Role) -> Role:
        """The super-role is a flag, never a member role."""
        if not v.is_member_role:
            raise ValueError(f"{v.value} is not a member role")
        return v

    @field_validator("org_id")
    @classmethod
    def validate_org_id(cls, v: str) -> str:
        """Members always belong to an organization."""
        if not v:
            raise ValueError("orgId must not be empty")
        return v


ClaimsSet = Union[SuperAdminClaims, MemberClaims]


def parse_claims(bag: Mapping[str, Any]) -> ClaimsSet:
    """Parse a raw claims bag into exactly one claims shape.

    Only the claim keys (``role``, ``orgId``, ``superAdmin``) are considered,
    so a full token payload can be passed directly.

    Args:
        bag: Raw key-value claims

    Returns:
        SuperAdminClaims or MemberClaims

    Raises:
        ClaimsFormatError: If the bag is empty, mixes both shapes, or carries
            invalid values
    """
    present = {key: bag[key] for key in CLAIM_KEYS if key in bag}

    if set(present) == {"superAdmin"}:
        if present["superAdmin"] is not True:
            raise ClaimsFormatError("superAdmin claim must be true")
        return SuperAdminClaims()

    if set(present) == {"role", "orgId"}:
        role, org_id = present["role"], present["orgId"]
        if not isinstance(role, str) or not isinstance(org_id, str):
            raise ClaimsFormatError("role and orgId claims must be strings")
        try:
            return MemberClaims(role=Role(role), orgId=OrgId(org_id))
        except ValueError as e:
            raise ClaimsFormatError(f"Invalid member claims: {e}") from e

    raise ClaimsFormatError(
        f"Claims must be either superAdmin or role+orgId, got {sorted(present)}"
    )


def parse_optional_claims(bag: Mapping[str, Any]) -> ClaimsSet | None:
    """Parse a claims bag that may legitimately be empty.

    An identity approved at creation but not yet materialized signs in with no
    claims at all. That is the only case mapped to ``None``; a partial bag is
    still rejected.
    """
    if not any(key in bag for key in CLAIM_KEYS):
        return None
    return parse_claims(bag)


def to_custom_claims(claims: ClaimsSet | None) -> dict[str, Any]:
    """Serialize claims into the bag stored on the identity and in tokens."""
    if claims is None:
        return {}
    return claims.model_dump(by_alias=True, mode="json")


def satisfies_role(claims: ClaimsSet | None, required: Role) -> bool:
    """Check a claims set against the role hierarchy.

    The super-role satisfies every check unconditionally.
    """
    if claims is None:
        return False
    if isinstance(claims, SuperAdminClaims):
        return True
    return claims.role.rank >= required.rank