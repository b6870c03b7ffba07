"""
Fixtures for API tests: the real application over in-memory repositories.
"""
import pytest
from fastapi.testclient import TestClient

from telemetry.main import create_application


@pytest.fixture
def client(container):
    """Create test client; lifespan runs, no database is touched."""
    with TestClient(create_application(container)) as c:
        yield c


def register(client, email="alice@example.com", password="s3cret-pass") -> dict:
    response = client.post("/api/v1/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_headers(client):
    return register(client, "alice@example.com")


@pytest.fixture
def bob_headers(client):
    return register(client, "bob@example.com")
