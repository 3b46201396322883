"""Observability probes for the Unkey API client."""

from unkey_provider.infrastructure.unkey.observability.client_probe import (
    DefaultUnkeyClientProbe,
    UnkeyClientProbe,
)

__all__ = [
    "DefaultUnkeyClientProbe",
    "UnkeyClientProbe",
]
