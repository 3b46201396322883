"""HTTP client for the Unkey v2 API."""

from unkey_provider.infrastructure.unkey.client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    UnkeyClient,
)
from unkey_provider.infrastructure.unkey.exceptions import (
    UnkeyAPIError,
    UnkeyConnectionError,
    UnkeyError,
    UnkeyNotFoundError,
    UnkeyResponseError,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "UnkeyAPIError",
    "UnkeyClient",
    "UnkeyConnectionError",
    "UnkeyError",
    "UnkeyNotFoundError",
    "UnkeyResponseError",
]
