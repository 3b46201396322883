"""Unit tests for provider settings."""

import logging

import pytest
from pydantic import ValidationError

from unkey_provider.infrastructure.settings import UnkeySettings, get_unkey_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    for name in (
        "UNKEY_ROOT_KEY",
        "UNKEY_BASE_URL",
        "UNKEY_TIMEOUT_SECONDS",
        "UNKEY_LOG_LEVEL",
        "UNKEY_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_unkey_settings.cache_clear()
    yield
    get_unkey_settings.cache_clear()


class TestUnkeySettings:
    """Tests for UnkeySettings."""

    def test_defaults(self):
        """Settings should have sensible defaults without any environment."""
        settings = UnkeySettings()

        assert settings.root_key is None
        assert settings.base_url == "https://api.unkey.com"
        assert settings.timeout_seconds == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_reads_prefixed_environment(self, monkeypatch):
        """Values should be read from UNKEY_ prefixed variables."""
        monkeypatch.setenv("UNKEY_ROOT_KEY", "unkey_env_key")
        monkeypatch.setenv("UNKEY_BASE_URL", "https://unkey.internal")
        monkeypatch.setenv("UNKEY_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("UNKEY_LOG_JSON", "true")

        settings = UnkeySettings()

        assert settings.root_key.get_secret_value() == "unkey_env_key"
        assert settings.base_url == "https://unkey.internal"
        assert settings.timeout_seconds == 5.0
        assert settings.log_json is True

    def test_root_key_is_not_rendered(self, monkeypatch):
        """The root key must not leak through repr."""
        monkeypatch.setenv("UNKEY_ROOT_KEY", "unkey_env_key")

        assert "unkey_env_key" not in repr(UnkeySettings())

    def test_reads_dotenv_file(self, tmp_path):
        """A .env file in the working directory is honoured."""
        (tmp_path / ".env").write_text("UNKEY_ROOT_KEY=unkey_dotenv_key\n")

        assert UnkeySettings().root_key.get_secret_value() == "unkey_dotenv_key"

    def test_log_level_is_normalized(self, monkeypatch):
        """Log levels are case-insensitive and exposed as numbers too."""
        monkeypatch.setenv("UNKEY_LOG_LEVEL", "debug")

        settings = UnkeySettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG

    def test_unknown_log_level_is_rejected(self, monkeypatch):
        """Unknown level names fail validation."""
        monkeypatch.setenv("UNKEY_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            UnkeySettings()

    @pytest.mark.parametrize("timeout", ["0", "-1", "301"])
    def test_timeout_bounds(self, monkeypatch, timeout):
        """Timeouts must be positive and at most five minutes."""
        monkeypatch.setenv("UNKEY_TIMEOUT_SECONDS", timeout)

        with pytest.raises(ValidationError):
            UnkeySettings()

    def test_get_unkey_settings_is_cached(self):
        """The accessor returns the same instance until the cache is cleared."""
        assert get_unkey_settings() is get_unkey_settings()
