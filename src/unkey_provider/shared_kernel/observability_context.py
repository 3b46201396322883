"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Attributes:
        request_id: Identifier of the current host operation, if the host
            supplies one.
        resource_type: Terraform type name being operated on (e.g. unkey_key).
        resource_id: Server-assigned identifier of the resource, once known.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(resource_type="unkey_key")
        probe = DefaultResourceProbe().with_context(context)
    """

    request_id: str | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.resource_type is not None:
            result["resource_type"] = self.resource_type
        if self.resource_id is not None:
            result["resource_id"] = self.resource_id
        result.update(self.extra)
        return result

    def with_resource(self, resource_type: str, resource_id: str | None = None) -> ObservationContext:
        """Create a new context scoped to a resource."""
        return ObservationContext(
            request_id=self.request_id,
            resource_type=resource_type,
            resource_id=resource_id,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            resource_type=self.resource_type,
            resource_id=self.resource_id,
            extra={**self.extra, **kwargs},
        )
