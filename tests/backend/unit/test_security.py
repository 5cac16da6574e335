"""
Unit tests for core.security module.
Tests password hashing and session token creation/validation.
"""
import datetime as dt

import jwt
import pytest

from forum.core.security import (
    JWT_ALG,
    JWT_SECRET,
    create_access_token,
    decode_access_token,
    hash_password,
    new_session_id,
    utc_now,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "TestPassword123"
        assert hash_password(password) != hash_password(password)

    def test_hash_password_produces_argon2_hash(self):
        password = "TestPassword123"
        hashed = hash_password(password)
        assert hashed.startswith("$argon2")
        assert password not in hashed

    def test_verify_password_correct_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("TestPassword123", hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False


class TestSessionTokens:
    """Tests for session token creation and validation."""

    def _expiry(self, minutes: int = 5) -> dt.datetime:
        return utc_now() + dt.timedelta(minutes=minutes)

    def test_token_only_references_session(self):
        """Token payload should carry the session id and timestamps, no user attributes."""
        sid = new_session_id()
        payload = decode_access_token(create_access_token(sid, self._expiry()))
        assert payload["sid"] == sid
        assert set(payload) == {"sid", "iat", "exp"}

    def test_session_ids_are_unique(self):
        assert len({new_session_id() for _ in range(50)}) == 50

    def test_expired_token_rejected(self):
        token = create_access_token(new_session_id(), utc_now() - dt.timedelta(seconds=5))
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_wrong_secret_rejected(self):
        token = jwt.encode({"sid": "abc", "exp": self._expiry()}, "another-secret-of-sufficient-length-xx", algorithm=JWT_ALG)
        with pytest.raises(jwt.InvalidSignatureError):
            decode_access_token(token)

    def test_token_without_session_claim_rejected(self):
        token = jwt.encode({"sub": "1", "is_admin": True, "exp": self._expiry()}, JWT_SECRET, algorithm=JWT_ALG)
        with pytest.raises(jwt.MissingRequiredClaimError):
            decode_access_token(token)

    def test_garbage_token_rejected(self):
        with pytest.raises(jwt.InvalidTokenError):
            decode_access_token("invalid.token.here")
