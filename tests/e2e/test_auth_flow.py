"""End-to-end tests for registration and authentication."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from devconnector.config import Settings
from devconnector.util.jwt import create_token
from tests.conftest import auth_headers, register
from tests.harness import create_client_fixture

client = create_client_fixture()

POST_ID = str(uuid4())

PROTECTED_ROUTES = [
    ("GET", "/api/auth"),
    ("POST", "/api/posts"),
    ("GET", "/api/posts"),
    ("GET", f"/api/posts/{POST_ID}"),
    ("DELETE", f"/api/posts/{POST_ID}"),
    ("PUT", f"/api/posts/like/{POST_ID}"),
    ("PUT", f"/api/posts/unlike/{POST_ID}"),
    ("POST", f"/api/posts/comment/{POST_ID}"),
    ("DELETE", f"/api/posts/comment/{POST_ID}/{uuid4()}"),
    ("GET", "/api/profile/me"),
    ("POST", "/api/profile"),
    ("DELETE", "/api/profile"),
    ("PUT", "/api/profile/experience"),
    ("DELETE", f"/api/profile/experience/{uuid4()}"),
    ("PUT", "/api/profile/education"),
    ("DELETE", f"/api/profile/education/{uuid4()}"),
]


class TestRegistration:
    """Tests for POST /api/users."""

    def test_register_then_fetch_self(self, client):
        """The token from registration should identify the new account."""
        token = register(client, "Ann")

        response = client.get("/api/auth", headers=auth_headers(token))

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Ann"
        assert data["email"] == "ann@example.com"
        assert data["avatar"].startswith("https://www.gravatar.com/avatar/")
        assert "password" not in data
        assert "password_hash" not in data

    def test_duplicate_email(self, client):
        register(client, "Ann")

        response = client.post(
            "/api/users",
            json={"name": "Ann", "email": "ANN@example.com", "password": "secret1"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists"

    def test_validation_lists_every_field(self, client):
        response = client.post(
            "/api/users", json={"name": "", "email": "not-an-email", "password": "123"}
        )

        assert response.status_code == 400
        params = {e["param"] for e in response.json()["errors"]}
        assert params == {"name", "email", "password"}


class TestLogin:
    """Tests for POST /api/auth."""

    def test_login_issues_working_token(self, client):
        register(client, "Ann", password="secret1")

        response = client.post(
            "/api/auth", json={"email": "ann@example.com", "password": "secret1"}
        )

        assert response.status_code == 200
        token = response.json()["token"]
        me = client.get("/api/auth", headers=auth_headers(token))
        assert me.json()["name"] == "Ann"

    def test_wrong_password(self, client):
        register(client, "Ann", password="secret1")

        response = client.post(
            "/api/auth", json={"email": "ann@example.com", "password": "nope"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid credentials"

    def test_unknown_email(self, client):
        response = client.post(
            "/api/auth", json={"email": "nobody@example.com", "password": "secret1"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid credentials"


class TestAuthGate:
    """Tests for the bearer token check."""

    @pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
    def test_protected_route_without_token(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 401
        assert response.json() == {
            "detail": "No token, authorization denied",
            "reason": "no_token",
        }

    def test_expired_token(self, client):
        """A correctly signed token past its expiry should be refused."""
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = create_token(
            str(uuid4()), Settings().auth, ttl_seconds=60, now=issued
        )

        response = client.get("/api/auth", headers=auth_headers(token))

        assert response.status_code == 401
        assert response.json()["reason"] == "invalid_token"

    def test_invalid_token(self, client):
        response = client.get("/api/posts", headers=auth_headers("garbage"))

        assert response.status_code == 401
        assert response.json()["reason"] == "invalid_token"

    def test_public_routes_need_no_token(self, client):
        assert client.get("/api/profile").status_code == 200
        assert client.get("/health").status_code == 200
