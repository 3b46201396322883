"""Domain probes for resource handlers."""

from unkey_provider.resources.observability.resource_probe import (
    DefaultResourceProbe,
    ResourceProbe,
)

__all__ = ["DefaultResourceProbe", "ResourceProbe"]
