"""Unit tests for the bearer token codec."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from devconnector.config import AuthSettings
from devconnector.domain.service import JWTService
from devconnector.domain.value import Principal, UserId
from devconnector.util.jwt import (
    ExpiredTokenError,
    InvalidTokenError,
    JWTError,
    create_token,
    verify_token,
)

SETTINGS = AuthSettings(jwt_secret="unit-test-secret")


class TestCreateToken:
    """Tests for create_token."""

    def test_round_trip_carries_user_id(self):
        """A freshly issued token should verify and carry the user id."""
        user_id = str(uuid4())

        token = create_token(user_id, SETTINGS, ttl_seconds=3600)
        payload = verify_token(token, SETTINGS)

        assert payload.user_id == user_id
        assert payload.exp - payload.iat == timedelta(seconds=3600)

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_rejects_non_positive_ttl(self, ttl):
        """TTL must be positive."""
        with pytest.raises(ValueError):
            create_token(str(uuid4()), SETTINGS, ttl_seconds=ttl)


class TestVerifyToken:
    """Tests for verify_token."""

    def test_expired_token(self):
        """A token past its expiry should raise ExpiredTokenError."""
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = create_token(str(uuid4()), SETTINGS, ttl_seconds=60, now=issued)

        with pytest.raises(ExpiredTokenError):
            verify_token(token, SETTINGS)

    def test_wrong_secret(self):
        """A token signed with another secret should not verify."""
        token = create_token(
            str(uuid4()), AuthSettings(jwt_secret="other-secret"), ttl_seconds=60
        )

        with pytest.raises(InvalidTokenError):
            verify_token(token, SETTINGS)

    def test_garbage(self):
        """A malformed token should raise InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            verify_token("not-a-token", SETTINGS)

    def test_missing_user_id_claim(self):
        """A validly signed token without user_id should be rejected."""
        exp = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode({"exp": exp}, SETTINGS.jwt_secret, algorithm="HS256")

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)


class TestJWTService:
    """Tests for JWTService.issue lifetimes."""

    def test_default_ttl_from_settings(self):
        jwt_service = JWTService(
            AuthSettings(jwt_secret="unit-test-secret", token_ttl_seconds=120)
        )

        token = jwt_service.issue(Principal(id=UserId(uuid4())))
        payload = verify_token(token, jwt_service.auth_settings)

        assert payload.exp - payload.iat == timedelta(seconds=120)

    def test_explicit_zero_ttl_is_rejected(self):
        """Zero is an explicit lifetime, not a request for the default."""
        jwt_service = JWTService(SETTINGS)

        with pytest.raises(ValueError):
            jwt_service.issue(Principal(id=UserId(uuid4())), ttl_seconds=0)
