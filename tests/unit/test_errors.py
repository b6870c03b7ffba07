"""
Unit tests for the error-to-HTTP mapping.
"""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from telemetry.api.v1.errors import register_exception_handlers, status_code_for
from telemetry.domain.exceptions import (
    ConflictError,
    ForbiddenError,
    HashingError,
    MalformedTokenError,
    NotFoundError,
    StorageError,
    TokenExpiredError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (ValidationError(), 400),
        (TokenExpiredError(), 401),
        (MalformedTokenError(), 401),
        (ForbiddenError(), 403),
        (NotFoundError(), 404),
        (ConflictError(), 409),
        (StorageError(), 500),
        (HashingError(), 500),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/storage")
    async def storage_failure():
        raise StorageError("connection to mongodb://db-host:27017 refused")

    @app.get("/expired")
    async def expired():
        raise TokenExpiredError()

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"item_id": item_id}

    return TestClient(app)


def test_server_errors_hide_details(client):
    response = client.get("/storage")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_unauthorized_carries_challenge(client):
    response = client.get("/expired")
    assert response.status_code == 401
    assert response.json() == {"detail": "Token has expired"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_request_validation_is_bad_request(client):
    response = client.get("/items/abc")
    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Invalid request"
    assert body["errors"][0]["loc"] == ["path", "item_id"]
