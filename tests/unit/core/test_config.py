"""Unit tests for application settings."""

import pytest

from core.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("PROFILE_STORE", raising=False)
        monkeypatch.delenv("APP_ENV", raising=False)

        settings = Settings(_env_file=None)

        assert settings.profile_store == "database"
        assert settings.oauth2_provider == "google"
        assert settings.is_production is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PROFILE_STORE", "memory")
        monkeypatch.setenv("APP_ENV", "production")

        settings = Settings(_env_file=None)

        assert settings.profile_store == "memory"
        assert settings.is_production is True

    def test_async_database_url_rewrites_scheme(self):
        settings = Settings(_env_file=None, database_url="postgresql://db:5432/scholarx")

        assert settings.async_database_url == "postgresql+asyncpg://db:5432/scholarx"

    def test_async_database_url_keeps_other_drivers(self):
        settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///./x.db")

        assert settings.async_database_url == "sqlite+aiosqlite:///./x.db"

    def test_rejects_unknown_store(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, profile_store="redis")
