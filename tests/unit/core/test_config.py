"""Unit tests for settings validation."""

import pytest

from core.config import AuthSettings, Settings


def make_settings(**overrides) -> Settings:
    auth = AuthSettings(SECRET_KEY=overrides.pop("SECRET_KEY", ""))
    return Settings(auth=auth, **overrides)


class TestProductionValidation:
    def test_rejects_short_secret_and_debug(self):
        settings = make_settings(ENVIRONMENT="production", DEBUG=True, SECRET_KEY="short", POSTGRES_PASSWORD="x" * 20)
        with pytest.raises(ValueError) as exc_info:
            settings.validate_production_settings()
        assert "SECRET_KEY" in str(exc_info.value)
        assert "DEBUG" in str(exc_info.value)

    def test_accepts_secure_settings(self):
        settings = make_settings(ENVIRONMENT="production", SECRET_KEY="k" * 40, POSTGRES_PASSWORD="p" * 20)
        settings.validate_production_settings()


class TestDevelopmentDefaults:
    def test_generates_secret_key(self):
        settings = make_settings(ENVIRONMENT="development")
        settings.validate_development_settings()
        assert len(settings.auth.SECRET_KEY) >= 32


class TestDatabaseUrl:
    def test_override_wins(self):
        assert make_settings(DATABASE_URL_OVERRIDE="sqlite://").DATABASE_URL == "sqlite://"

    def test_built_from_parts(self):
        settings = make_settings(
            DATABASE_URL_OVERRIDE="",
            POSTGRES_USER="u",
            POSTGRES_PASSWORD="p",
            POSTGRES_HOST="db",
            POSTGRES_PORT=5433,
            POSTGRES_DB="routes",
        )
        assert settings.DATABASE_URL == "postgresql://u:p@db:5433/routes"

    def test_cors_origin_list(self):
        settings = make_settings(FRONTEND_URL="http://a.test, http://b.test")
        assert settings.cors_origin_list == ["http://a.test", "http://b.test"]
