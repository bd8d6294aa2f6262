"""
Tests for JWT issuance and validation.
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from jose import jwt

from auth import create_access_token, decode_token
from core.exceptions import UnauthorizedException
from config import settings
from database.models import UserORM


class TestTokens:

    def test_create_and_decode(self):
        token = create_access_token({"sub": 42})
        payload = decode_token(token)

        assert payload["sub"] == "42"
        assert payload["iss"] == settings.jwt_issuer
        assert payload["aud"] == settings.jwt_audience
        assert payload["exp"] > payload["iat"]

    def test_sub_is_required(self):
        with pytest.raises(ValueError):
            create_access_token({"email": "x@example.com"})

    def test_expired_token(self):
        token = create_access_token({"sub": 1}, expires_delta=timedelta(seconds=-10))

        with pytest.raises(UnauthorizedException) as exc:
            decode_token(token)
        assert exc.value.message == "Token expired"

    def test_wrong_signature(self):
        token = jwt.encode(
            {"sub": "1", "iss": settings.jwt_issuer, "aud": settings.jwt_audience},
            "another-secret-key-that-is-long-enough-to-sign",
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(UnauthorizedException):
            decode_token(token)

    def test_wrong_audience(self):
        token = jwt.encode(
            {"sub": "1", "iss": settings.jwt_issuer, "aud": "someone-else"},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )
        with pytest.raises(UnauthorizedException):
            decode_token(token)


class TestTokenDependencies:

    def test_token_for_deleted_user(self, client: TestClient):
        token = create_access_token({"sub": 9999})

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"error": "User not found"}

    def test_invalid_token_on_optional_route(self, client: TestClient, pet_data):
        response = client.post(
            "/pets", json=pet_data, headers={"Authorization": "Bearer broken"}
        )

        assert response.status_code == 401

    def test_expired_token_on_me(self, client: TestClient, user: UserORM):
        token = create_access_token({"sub": user.id}, expires_delta=timedelta(seconds=-10))

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"error": "Token expired"}
