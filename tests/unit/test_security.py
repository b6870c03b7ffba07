"""
Unit tests for telemetry.core.security
"""
from datetime import timedelta

import jwt
import pytest
from telemetry.core.security import PasswordHasher, SessionTokenIssuer
from telemetry.domain.exceptions import (
    MalformedTokenError,
    TokenExpiredError,
    UnauthorizedError,
)


class TestPasswordHasher:
    """Tests for PasswordHasher.hash / verify"""

    def test_returns_non_empty_string(self, password_hasher):
        result = password_hasher.hash("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self, password_hasher):
        """Each hash should use a new salt, so hashes differ."""
        h1 = password_hasher.hash("same")
        h2 = password_hasher.hash("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self, password_hasher):
        result = password_hasher.hash("secret123")
        assert result != "secret123"
        assert "secret123" not in result

    def test_cost_is_configurable(self):
        assert PasswordHasher(rounds=5).hash("x").startswith("$2b$05$")

    def test_matching_password_returns_true(self, password_hasher):
        hashed = password_hasher.hash("correct")
        assert password_hasher.verify("correct", hashed) is True

    def test_wrong_password_returns_false(self, password_hasher):
        hashed = password_hasher.hash("correct")
        assert password_hasher.verify("wrong", hashed) is False

    def test_garbage_digest_returns_false(self, password_hasher):
        assert password_hasher.verify("anything", "not-a-bcrypt-hash") is False

    def test_verify_dummy_never_matches(self, password_hasher):
        assert password_hasher.verify_dummy("unknown-account-placeholder") is False


class TestSessionTokenIssuer:
    """Tests for SessionTokenIssuer.issue / verify"""

    def test_issue_and_verify_roundtrip(self, token_issuer):
        token = token_issuer.issue("user-123", "test@example.com")
        claims = token_issuer.verify(token)
        assert claims.user_id == "user-123"
        assert claims.email == "test@example.com"
        assert claims.expires_at - claims.issued_at == timedelta(days=1)

    def test_valid_until_just_before_expiry(self, token_issuer, clock):
        token = token_issuer.issue("user-1", "a@example.com", ttl=timedelta(minutes=10))
        clock.advance(10 * 60 - 1)
        assert token_issuer.verify(token).user_id == "user-1"

    def test_expired_at_expiry_instant(self, token_issuer, clock):
        token = token_issuer.issue("user-1", "a@example.com", ttl=timedelta(minutes=10))
        clock.advance(10 * 60)
        with pytest.raises(TokenExpiredError):
            token_issuer.verify(token)

    def test_expired_after_expiry(self, token_issuer, clock):
        token = token_issuer.issue("user-1", "a@example.com")
        clock.advance(timedelta(days=2).total_seconds())
        with pytest.raises(TokenExpiredError):
            token_issuer.verify(token)

    def test_expired_is_unauthorized(self):
        assert issubclass(TokenExpiredError, UnauthorizedError)
        assert issubclass(MalformedTokenError, UnauthorizedError)

    def test_verify_invalid_token_raises(self, token_issuer):
        with pytest.raises(MalformedTokenError):
            token_issuer.verify("invalid.jwt.token")

    def test_verify_empty_token_raises(self, token_issuer):
        with pytest.raises(MalformedTokenError):
            token_issuer.verify("")

    def test_verify_tampered_token_raises(self, token_issuer):
        token = token_issuer.issue("user-1", "a@example.com")
        header, payload, signature = token.split(".")
        tampered = ".".join([header, payload, signature[::-1]])
        with pytest.raises(MalformedTokenError):
            token_issuer.verify(tampered)

    def test_rotated_secret_invalidates_tokens(self, token_issuer, clock):
        token = token_issuer.issue("user-1", "a@example.com")
        rotated = SessionTokenIssuer(secret_key="another-secret", clock=clock)
        with pytest.raises(MalformedTokenError):
            rotated.verify(token)

    def test_token_without_subject_is_malformed(self, token_issuer, clock):
        now = int(clock())
        token = jwt.encode(
            {"email": "a@example.com", "iat": now, "exp": now + 60},
            "test_jwt_secret",
            algorithm="HS256",
        )
        with pytest.raises(MalformedTokenError):
            token_issuer.verify(token)
