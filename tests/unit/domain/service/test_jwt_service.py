"""Unit tests for JWTService and the claims token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from gatehouse.config import AuthSettings
from gatehouse.domain.model import MemberClaims, SuperAdminClaims
from gatehouse.domain.service import JWTService
from gatehouse.domain.value import Role
from gatehouse.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret", token_ttl_minutes=60)


class TestClaimsToken:
    """Tests for token creation and verification."""

    def test_member_round_trip(self):
        claims = MemberClaims(role=Role.USER, org_id="org-1")
        token = create_token("uid-1", "a@x.com", claims, SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "uid-1"
        assert payload.email == "a@x.com"
        assert payload.claims == claims
        assert payload.exp - payload.iat == timedelta(minutes=60)

    def test_payload_carries_exactly_the_claim_fields(self):
        token = create_token("uid-1", "a@x.com", SuperAdminClaims(), SETTINGS)

        raw = jwt.decode(token, "test-secret", algorithms=["HS256"])

        assert set(raw) == {"sub", "email", "iat", "exp", "superAdmin"}

    def test_empty_claims(self):
        token = create_token("uid-1", "a@x.com", None, SETTINGS)

        assert verify_token(token, SETTINGS).claims is None

    def test_expired_token_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(minutes=61)
        token = create_token("uid-1", "a@x.com", None, SETTINGS, issued_at=issued)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_rejected(self):
        token = create_token("uid-1", "a@x.com", None, SETTINGS)

        with pytest.raises(JWTError):
            verify_token(token, AuthSettings(jwt_secret="other"))

    def test_malformed_claims_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "sub": "uid-1",
                "email": "a@x.com",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "role": "admin",
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="Malformed claims"):
            verify_token(token, SETTINGS)


class TestJWTService:
    """Tests for bearer header handling."""

    def test_payload_from_header(self):
        service = JWTService(auth_settings=SETTINGS)
        token = service.create_token("uid-1", "a@x.com", SuperAdminClaims())

        payload = service.get_payload_from_header(f"Bearer {token}")

        assert payload is not None
        assert payload.claims == SuperAdminClaims()

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer not-a-jwt"])
    def test_bad_headers_yield_none(self, header):
        service = JWTService(auth_settings=SETTINGS)

        assert service.get_payload_from_header(header) is None
