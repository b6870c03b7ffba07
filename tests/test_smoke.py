"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_settings(mock_env):
    """Verify the package can be imported and reads its environment."""
    from telemetry.core.config import Settings

    settings = Settings()
    assert settings.mongo_database_name == "test_telemetry_db"
    assert settings.bcrypt_rounds == 4
    assert settings.access_token_expire_minutes == 1440


def test_get_settings_is_singleton():
    from telemetry.core.config import get_settings

    assert get_settings() is get_settings()
