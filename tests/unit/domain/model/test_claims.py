"""Unit tests for the claims contract."""

import pytest

from gatehouse.domain.error import ClaimsFormatError
from gatehouse.domain.model import (
    MemberClaims,
    SuperAdminClaims,
    parse_claims,
    parse_optional_claims,
    satisfies_role,
    to_custom_claims,
)
from gatehouse.domain.value import Role


class TestParseClaims:
    """Tests for parse_claims."""

    def test_super_admin_bag(self):
        """{"superAdmin": true} should parse to SuperAdminClaims."""
        assert parse_claims({"superAdmin": True}) == SuperAdminClaims()

    def test_member_bag(self):
        """role + orgId should parse to MemberClaims."""
        claims = parse_claims({"role": "viewer", "orgId": "org-1"})

        assert claims == MemberClaims(role=Role.VIEWER, org_id="org-1")

    def test_ignores_non_claim_keys(self):
        """A whole token payload can be parsed directly."""
        claims = parse_claims(
            {"sub": "uid-1", "email": "a@x.com", "role": "admin", "orgId": "org-1"}
        )

        assert claims == MemberClaims(role=Role.ADMIN, org_id="org-1")

    @pytest.mark.parametrize(
        "bag",
        [
            {},
            {"role": "user"},
            {"orgId": "org-1"},
            {"superAdmin": False},
            {"superAdmin": "true"},
            {"superAdmin": True, "role": "admin", "orgId": "org-1"},
            {"role": "owner", "orgId": "org-1"},
            {"role": "superAdmin", "orgId": "org-1"},
            {"role": "user", "orgId": ""},
            {"role": 1, "orgId": "org-1"},
        ],
    )
    def test_rejects_malformed_bags(self, bag):
        """Anything that is not exactly one shape is rejected, never defaulted."""
        with pytest.raises(ClaimsFormatError):
            parse_claims(bag)

    def test_optional_empty_bag_is_none(self):
        """An empty bag is the not-yet-materialized identity."""
        assert parse_optional_claims({"sub": "uid-1"}) is None

    def test_optional_partial_bag_still_rejected(self):
        """A partial bag is malformed, not empty."""
        with pytest.raises(ClaimsFormatError):
            parse_optional_claims({"role": "user"})


class TestClaimsHelpers:
    """Tests for serialization and role checks."""

    def test_to_custom_claims_uses_wire_names(self):
        """Serialized bags use the camelCase claim keys."""
        assert to_custom_claims(SuperAdminClaims()) == {"superAdmin": True}
        assert to_custom_claims(MemberClaims(role=Role.USER, org_id="o")) == {
            "role": "user",
            "orgId": "o",
        }
        assert to_custom_claims(None) == {}

    def test_member_claims_refuse_super_role(self):
        """The super-role is a flag, never a member role."""
        with pytest.raises(ValueError):
            MemberClaims(role=Role.SUPER_ADMIN, org_id="org-1")

    def test_role_hierarchy(self):
        """viewer < user < admin; the super-role satisfies everything."""
        user = MemberClaims(role=Role.USER, org_id="o")

        assert satisfies_role(user, Role.VIEWER)
        assert satisfies_role(user, Role.USER)
        assert not satisfies_role(user, Role.ADMIN)
        assert satisfies_role(SuperAdminClaims(), Role.ADMIN)
        assert not satisfies_role(None, Role.VIEWER)
