"""
Integration tests for auth API endpoints.
Uses TestClient over in-memory repositories (no real DB).
"""
import pytest

pytestmark = pytest.mark.integration


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "test@example.com", "password": "password123"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 86400
        assert data["token"]
        assert "access_token" not in data

    def test_register_duplicate_email(self, client):
        payload = {"email": "test@example.com", "password": "password123"}
        assert client.post("/api/v1/auth/register", json=payload).status_code == 201

        response = client.post("/api/v1/auth/register", json={**payload, "password": "other"})
        assert response.status_code == 409
        assert response.json()["detail"] == "User already exists"

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "password": "password123"},
            {"email": "test@example.com", "password": ""},
            {"email": "test@example.com"},
            {"email": "test@example.com", "password": "x" * 73},
        ],
    )
    def test_register_invalid_payload(self, client, payload):
        response = client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"

    def test_login_success(self, client):
        client.post("/api/v1/auth/register", json={"email": "test@example.com", "password": "password123"})

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "password123"},
        )
        assert response.status_code == 200
        assert response.json()["token"]

    @pytest.mark.parametrize(
        "email, password",
        [("test@example.com", "wrongpass"), ("nobody@example.com", "password123")],
    )
    def test_login_failure_is_indistinguishable(self, client, email, password):
        client.post("/api/v1/auth/register", json={"email": "test@example.com", "password": "password123"})

        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert response.status_code == 401
        assert response.json()["detail"] == "Email or password incorrect"

    def test_me(self, client, alice_headers):
        response = client.get("/api/v1/auth/me", headers=alice_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "alice@example.com"
        assert "hashed_password" not in data

    def test_me_without_token(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401


class TestHealthAPI:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
