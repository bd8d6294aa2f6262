"""
Tests for Auth API endpoints.

Tests cover:
- Registration (success, duplicate email, missing fields)
- Login (success, indistinguishable failures)
- /auth/me with bearer token
- Profile read/update and password change
"""

from fastapi.testclient import TestClient
from typing import Dict, Any

from database.models import UserORM


class TestRegister:
    """Tests for POST /auth/register."""

    def test_register_success(self, client: TestClient, user_data: Dict[str, Any]):
        response = client.post("/auth/register", json=user_data)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["user"]["email"] == user_data["email"]
        assert data["user"]["name"] == user_data["name"]
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        # el digest nunca sale en la respuesta
        assert "password" not in data["user"]
        assert "password_digest" not in data["user"]

    def test_register_blank_name(self, client: TestClient, user_data: Dict[str, Any]):
        user_data["name"] = "   "
        response = client.post("/auth/register", json=user_data)

        assert response.status_code == 400
        assert response.json()["error"].startswith("name:")

    def test_register_normalizes_email(self, client: TestClient, user_data: Dict[str, Any]):
        user_data["email"] = "  Ana@Example.COM "
        response = client.post("/auth/register", json=user_data)

        assert response.status_code == 201
        assert response.json()["user"]["email"] == "ana@example.com"

    def test_register_duplicate_email(
        self, client: TestClient, user: UserORM, user_data: Dict[str, Any]
    ):
        response = client.post("/auth/register", json=user_data)

        assert response.status_code == 400
        assert response.json() == {"error": "Email already registered"}

    def test_register_missing_fields(self, client: TestClient):
        response = client.post("/auth/register", json={"email": "x@example.com"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error.startswith("Missing required fields")
        assert "password" in error
        assert "name" in error

    def test_register_short_password(self, client: TestClient, user_data: Dict[str, Any]):
        user_data["password"] = "123"
        response = client.post("/auth/register", json=user_data)

        assert response.status_code == 400
        assert "password" in response.json()["error"]


class TestLogin:
    """Tests for POST /auth/login."""

    def test_login_success(
        self, client: TestClient, user: UserORM, user_data: Dict[str, Any]
    ):
        response = client.post(
            "/auth/login",
            json={"email": user_data["email"], "password": user_data["password"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == user.id
        assert data["access_token"]

    def test_login_email_is_case_insensitive(
        self, client: TestClient, user: UserORM, user_data: Dict[str, Any]
    ):
        response = client.post(
            "/auth/login",
            json={"email": user_data["email"].upper(), "password": user_data["password"]},
        )
        assert response.status_code == 200

    def test_login_failures_are_indistinguishable(
        self, client: TestClient, user: UserORM, user_data: Dict[str, Any]
    ):
        unknown = client.post(
            "/auth/login",
            json={"email": "nobody@example.com", "password": user_data["password"]},
        )
        wrong = client.post(
            "/auth/login",
            json={"email": user_data["email"], "password": "wrong-password"},
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json() == {"error": "Invalid credentials"}

    def test_login_missing_fields(self, client: TestClient):
        response = client.post("/auth/login", json={"email": "ana@example.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: password"

    def test_login_then_me(self, client: TestClient, user: UserORM, user_data: Dict[str, Any]):
        token = client.post(
            "/auth/login",
            json={"email": user_data["email"], "password": user_data["password"]},
        ).json()["access_token"]

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["email"] == user_data["email"]


class TestMe:
    """Tests for GET /auth/me."""

    def test_me_requires_token(self, client: TestClient):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}

    def test_me_rejects_garbage_token(self, client: TestClient):
        response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert "error" in response.json()

    def test_me_with_token(
        self, client: TestClient, user: UserORM, auth_headers: Dict[str, str]
    ):
        response = client.get("/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == user.id


class TestProfile:
    """Tests for profile endpoints."""

    def test_get_profile(self, client: TestClient, user: UserORM):
        response = client.get(f"/auth/profile/{user.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == user.name
        assert "password_digest" not in data

    def test_get_profile_not_found(self, client: TestClient):
        response = client.get("/auth/profile/9999")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_update_profile(self, client: TestClient, user: UserORM):
        response = client.put(
            f"/auth/profile/{user.id}",
            json={"name": "Ana Maria", "phone": "(11) 90000-0000"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Profile updated successfully"
        assert data["user"]["name"] == "Ana Maria"
        assert data["user"]["phone"] == "(11) 90000-0000"

    def test_update_profile_rejects_blank_name(self, client: TestClient, user: UserORM):
        response = client.put(f"/auth/profile/{user.id}", json={"name": "  "})

        assert response.status_code == 400
        assert response.json()["error"].startswith("name:")

    def test_update_profile_trims_name(self, client: TestClient, user: UserORM):
        response = client.put(f"/auth/profile/{user.id}", json={"name": " Ana Maria  "})

        assert response.json()["user"]["name"] == "Ana Maria"

    def test_update_profile_requires_name(self, client: TestClient, user: UserORM):
        response = client.put(f"/auth/profile/{user.id}", json={"phone": "123"})

        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: name"

    def test_change_password(
        self, client: TestClient, user: UserORM, user_data: Dict[str, Any]
    ):
        response = client.put(
            f"/auth/profile/{user.id}/password",
            json={"current_password": user_data["password"], "new_password": "brand-new-pass"},
        )
        assert response.status_code == 200

        old_login = client.post(
            "/auth/login",
            json={"email": user_data["email"], "password": user_data["password"]},
        )
        new_login = client.post(
            "/auth/login",
            json={"email": user_data["email"], "password": "brand-new-pass"},
        )
        assert old_login.status_code == 401
        assert new_login.status_code == 200

    def test_change_password_wrong_current(self, client: TestClient, user: UserORM):
        response = client.put(
            f"/auth/profile/{user.id}/password",
            json={"current_password": "nope", "new_password": "brand-new-pass"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Current password is incorrect"}
