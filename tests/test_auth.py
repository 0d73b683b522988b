# =============================================================================
# tests/test_auth.py - Bearer Token Gate Tests
# =============================================================================
# Every /api/users route must answer 401 for a missing or invalid token,
# and must do so before the store is touched.
# =============================================================================

import time
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.auth import issue_token, verify_token
from app.exceptions import UnauthorizedError
from app.main import create_app
from lib.user_store import InMemoryUserStore

USER_ROUTES = [
    ("GET", "/api/users", None),
    ("GET", "/api/users/1", None),
    ("POST", "/api/users", {"name": "Alice", "email": "a@x.com"}),
    ("PUT", "/api/users/1", {"name": "Alice", "email": "a@x.com"}),
    ("DELETE", "/api/users/1", None),
]


def _claims(settings, **overrides):
    now = int(time.time())
    claims = {
        "sub": "test-user",
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": now,
        "exp": now + 600,
    }
    claims.update(overrides)
    return {k: v for k, v in claims.items() if v is not None}


def _sign(settings, claims, key=None):
    return jwt.encode(claims, key or settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


# =============================================================================
# verify_token
# =============================================================================

class TestVerifyToken:
    """Tests for token verification."""

    def test_valid_token(self, settings):
        token = issue_token(settings, "user-42", email="u@x.com")

        principal = verify_token(token, settings)

        assert principal.subject == "user-42"
        assert principal.email == "u@x.com"
        assert principal.claims["iss"] == settings.JWT_ISSUER

    def test_bad_signature(self, settings):
        token = _sign(settings, _claims(settings), key="another-secret-key-entirely")

        with pytest.raises(UnauthorizedError, match="Invalid token"):
            verify_token(token, settings)

    def test_wrong_issuer(self, settings):
        token = _sign(settings, _claims(settings, iss="someone-else"))

        with pytest.raises(UnauthorizedError, match="Invalid token claims"):
            verify_token(token, settings)

    def test_wrong_audience(self, settings):
        token = _sign(settings, _claims(settings, aud="other-api"))

        with pytest.raises(UnauthorizedError, match="Invalid token claims"):
            verify_token(token, settings)

    def test_expired(self, settings):
        past = int(time.time()) - 3600
        token = _sign(settings, _claims(settings, iat=past - 60, exp=past))

        with pytest.raises(UnauthorizedError, match="Token has expired"):
            verify_token(token, settings)

    def test_missing_expiry(self, settings):
        claims = _claims(settings)
        del claims["exp"]

        with pytest.raises(UnauthorizedError):
            verify_token(_sign(settings, claims), settings)

    def test_missing_subject(self, settings):
        claims = _claims(settings)
        del claims["sub"]

        with pytest.raises(UnauthorizedError, match="missing subject"):
            verify_token(_sign(settings, claims), settings)

    def test_garbage_token(self, settings):
        with pytest.raises(UnauthorizedError):
            verify_token("not.a.jwt", settings)


# =============================================================================
# HTTP Gate
# =============================================================================

class TestGate:
    """Tests for the router-level dependency."""

    @pytest.fixture
    def spy_store(self):
        return AsyncMock(spec=InMemoryUserStore)

    @pytest.fixture
    def gated_client(self, settings, spy_store):
        with TestClient(create_app(settings, user_store=spy_store)) as test_client:
            yield test_client

    @pytest.mark.parametrize("method, path, body", USER_ROUTES)
    def test_missing_token_is_401(self, gated_client, spy_store, method, path, body):
        response = gated_client.request(method, path, json=body)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {"statusCode": 401, "message": "Missing bearer token."}
        assert spy_store.method_calls == []

    @pytest.mark.parametrize("method, path, body", USER_ROUTES)
    def test_invalid_token_is_401(self, gated_client, spy_store, method, path, body):
        headers = {"Authorization": "Bearer not.a.jwt"}

        response = gated_client.request(method, path, json=body, headers=headers)

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token."
        assert spy_store.method_calls == []

    def test_non_bearer_scheme_is_401(self, gated_client, token):
        response = gated_client.get("/api/users", headers={"Authorization": f"Basic {token}"})

        assert response.status_code == 401

    def test_expired_token_is_401(self, gated_client, settings):
        past = int(time.time()) - 3600
        token = _sign(settings, _claims(settings, iat=past - 60, exp=past))

        response = gated_client.get("/api/users", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Token has expired."

    def test_valid_token_is_admitted(self, client, auth_headers):
        response = client.get("/api/users", headers=auth_headers)

        assert response.status_code == 200

    def test_health_needs_no_token(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["store"] == "memory"
