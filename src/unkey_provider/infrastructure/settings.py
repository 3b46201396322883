"""Provider settings using pydantic-settings.

Settings are loaded from environment variables. Only the root key has no
usable default; it may also be supplied through the provider configuration
block, which takes precedence.
"""

from functools import lru_cache
import logging

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unkey_provider.infrastructure.unkey.client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
)


class UnkeySettings(BaseSettings):
    """Unkey provider settings.

    Environment variables:
        UNKEY_ROOT_KEY: Root key for the Unkey API (fallback for the
            provider's root_key attribute)
        UNKEY_BASE_URL: API base URL (default: https://api.unkey.com)
        UNKEY_TIMEOUT_SECONDS: Per-request timeout (default: 30)
        UNKEY_LOG_LEVEL: Minimum log level (default: INFO)
        UNKEY_LOG_JSON: Force JSON log output even in a TTY (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="UNKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_key: SecretStr | None = Field(
        default=None,
        description="Root key for the Unkey API",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Per-request timeout in seconds",
        gt=0,
        le=300,
    )
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=False, description="Force JSON log output")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        normalized = value.upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return normalized

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_unkey_settings() -> UnkeySettings:
    """Get cached provider settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return UnkeySettings()
