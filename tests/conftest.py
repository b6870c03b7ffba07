"""
Shared pytest fixtures for telemetry backend tests.
"""
import os
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest

from fakes import (
    TEST_INGESTION_KEY,
    InMemoryDeviceRepository,
    InMemoryEventRepository,
    InMemoryOwnershipRegistry,
    InMemoryUserRepository,
)
from telemetry.application.services.device_gatekeeper import DeviceGateKeeper
from telemetry.core.config import Settings
from telemetry.core.security import PasswordHasher, SessionTokenIssuer
from telemetry.di.base_container import BaseContainer
from telemetry.di.providers import AuthProvider, DeviceProvider, EventsProvider, SecurityProvider
from telemetry.domain.repositories.device_repository import DeviceRepository
from telemetry.domain.repositories.event_repository import EventRepository
from telemetry.domain.repositories.ownership_registry import OwnershipRegistry
from telemetry.domain.repositories.user_repository import UserRepository


class FakeClock:
    """Controllable replacement for time.time"""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_telemetry_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "INGESTION_API_KEY": TEST_INGESTION_KEY,
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Settings stand-in with fast hashing and a known ingestion key."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4
    mock.ingestion_api_key = TEST_INGESTION_KEY
    mock.cors_allow_origins = ["http://localhost:3000"]
    mock.log_level = "WARNING"
    return mock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def password_hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer(clock):
    return SessionTokenIssuer(
        secret_key="test_jwt_secret",
        algorithm="HS256",
        ttl=timedelta(days=1),
        clock=clock,
    )


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def device_repo():
    return InMemoryDeviceRepository()


@pytest.fixture
def ownership_registry():
    return InMemoryOwnershipRegistry()


@pytest.fixture
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture
def gatekeeper(token_issuer, user_repo, device_repo, ownership_registry):
    return DeviceGateKeeper(
        ingestion_secret=TEST_INGESTION_KEY,
        token_issuer=token_issuer,
        user_repository=user_repo,
        device_repository=device_repo,
        ownership_registry=ownership_registry,
    )


@pytest.fixture
def container(mock_settings, user_repo, device_repo, ownership_registry, event_repo):
    """Container wired exactly like DIContainer, but over in-memory repositories."""
    c = BaseContainer()
    c.register_singleton(Settings, mock_settings)
    c.register_singleton(UserRepository, user_repo)
    c.register_singleton(DeviceRepository, device_repo)
    c.register_singleton(OwnershipRegistry, ownership_registry)
    c.register_singleton(EventRepository, event_repo)
    SecurityProvider.register(c)
    AuthProvider.register(c)
    DeviceProvider.register(c)
    EventsProvider.register(c)
    return c
