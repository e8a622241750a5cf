"""Unit tests for JWT issuance and verification."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from staffql.auth.tokens import TokenError, TokenIssuer


@pytest.fixture
def secret_key():
    return "test-secret-key-for-testing-only"


@pytest.fixture
def issuer(secret_key):
    return TokenIssuer(secret_key=secret_key, issuer="test-staffql", audience="test-api")


class TestTokenIssuer:
    def test_issue_binds_user_id_and_email(self, issuer, secret_key):
        issued = issuer.issue(user_id="64b7f0c2a1b2c3d4e5f60718", email="ann@x.com")

        payload = jwt.decode(
            issued.token, secret_key, algorithms=["HS256"], audience="test-api"
        )
        assert payload["sub"] == "64b7f0c2a1b2c3d4e5f60718"
        assert payload["email"] == "ann@x.com"
        assert payload["iss"] == "test-staffql"

    def test_default_expiry_is_one_hour(self, issuer):
        now = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)

        issued = issuer.issue(user_id="u1", email="a@b.c", now=now)

        assert issued.expires_at == now + timedelta(hours=1)
        assert issued.expires_at_timestamp == int((now + timedelta(hours=1)).timestamp())

    def test_expiry_matches_exp_claim(self, issuer, secret_key):
        issued = issuer.issue(user_id="u1", email="a@b.c")

        payload = jwt.decode(
            issued.token, secret_key, algorithms=["HS256"], audience="test-api"
        )
        assert payload["exp"] == issued.expires_at_timestamp

    def test_verify_round_trip(self, issuer):
        issued = issuer.issue(user_id="u1", email="a@b.c")

        claims = issuer.verify(issued.token)

        assert claims["sub"] == "u1"
        assert claims["email"] == "a@b.c"

    def test_verify_rejects_wrong_secret(self, issuer):
        other = TokenIssuer(secret_key="another-secret", issuer="test-staffql", audience="test-api")
        issued = other.issue(user_id="u1", email="a@b.c")

        with pytest.raises(TokenError, match="Invalid token"):
            issuer.verify(issued.token)

    def test_verify_rejects_expired_token(self, issuer):
        issued = issuer.issue(
            user_id="u1", email="a@b.c", now=datetime.now(UTC) - timedelta(hours=2)
        )

        with pytest.raises(TokenError):
            issuer.verify(issued.token)

    def test_verify_rejects_garbage(self, issuer):
        with pytest.raises(TokenError):
            issuer.verify("not-a-jwt")

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            TokenIssuer(secret_key="")
