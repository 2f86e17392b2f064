"""Integration tests for SimpleJWT authentication.

Validates:
  - /health is public (plain Django view, no DRF).
  - The OpenAPI schema is public.
  - The customer-information endpoints return 401 without a valid token.
  - A token obtained from /api/v1/auth/token/ grants access.
"""

import pytest

from django.contrib.auth import get_user_model

pytestmark = pytest.mark.integration

PROTECTED_URL = "/api/v1/customer-information/"


class TestPublicEndpoints:
    """Health check and schema remain accessible without credentials."""

    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_schema_is_public(self, api_client):
        response = api_client.get("/api/schema/")
        assert response.status_code == 200


class TestProtectedEndpoints:
    """All DRF endpoints require a valid JWT by default (fail closed)."""

    def test_no_token_returns_401(self, api_client):
        response = api_client.get(PROTECTED_URL)
        assert response.status_code == 401

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get(PROTECTED_URL)
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get(PROTECTED_URL)
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get(PROTECTED_URL)
        assert response.status_code == 401
        assert "Bearer" in response.get("WWW-Authenticate", "")


class TestTokenFlow:
    def test_obtained_token_grants_access(self, api_client):
        get_user_model().objects.create_user(username="clerk", password="clerk-pass-1")

        token_response = api_client.post(
            "/api/v1/auth/token/",
            {"username": "clerk", "password": "clerk-pass-1"},
            format="json",
        )
        assert token_response.status_code == 200
        access = token_response.data["access"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        response = api_client.get(PROTECTED_URL)
        assert response.status_code == 200
        assert response.data == {"data": [], "total": 0}

    def test_wrong_password_returns_401(self, api_client):
        get_user_model().objects.create_user(username="clerk", password="clerk-pass-1")
        response = api_client.post(
            "/api/v1/auth/token/",
            {"username": "clerk", "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
