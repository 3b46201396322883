"""Domain probe for resource lifecycle operations.

Following Domain-Oriented Observability patterns, this probe captures the
lifecycle events of managed Unkey resources (create, read, update, delete)
together with configuration problems detected by the handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from unkey_provider.shared_kernel.observability_context import ObservationContext


class ResourceProbe(Protocol):
    """Domain probe for resource handler operations."""

    def resource_created(self, resource_id: str) -> None:
        """Record that a resource was created remotely."""
        ...

    def resource_creation_failed(self, error: str) -> None:
        """Record that creating a resource failed."""
        ...

    def resource_read(self, resource_id: str) -> None:
        """Record that a resource was refreshed from the API."""
        ...

    def resource_read_failed(self, resource_id: str, error: str) -> None:
        """Record that refreshing a resource failed."""
        ...

    def resource_updated(self, resource_id: str, changed_fields: list[str]) -> None:
        """Record that changed fields were sent to the API."""
        ...

    def resource_update_skipped(self, resource_id: str) -> None:
        """Record that an update had no remote changes to send."""
        ...

    def resource_update_failed(self, resource_id: str, error: str) -> None:
        """Record that updating a resource failed."""
        ...

    def resource_deleted(self, resource_id: str, permanent: bool = False) -> None:
        """Record that a resource was deleted remotely."""
        ...

    def resource_deletion_failed(self, resource_id: str, error: str) -> None:
        """Record that deleting a resource failed."""
        ...

    def invalid_configuration(self, attribute: str, reason: str) -> None:
        """Record that an attribute value could not be converted."""
        ...

    def unexpected_provider_data(self, received_type: str) -> None:
        """Record that the host handed over something other than a client."""
        ...

    def with_context(self, context: ObservationContext) -> ResourceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultResourceProbe:
    """Default implementation of ResourceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _emit(self, level: str, event: str, **fields: Any) -> None:
        # Event fields win over context fields of the same name
        getattr(self._logger, level)(event, **{**self._get_context_kwargs(), **fields})

    def with_context(self, context: ObservationContext) -> DefaultResourceProbe:
        return DefaultResourceProbe(logger=self._logger, context=context)

    def resource_created(self, resource_id: str) -> None:
        self._emit("info", "unkey_resource_created", resource_id=resource_id)

    def resource_creation_failed(self, error: str) -> None:
        self._emit("error", "unkey_resource_creation_failed", error=error)

    def resource_read(self, resource_id: str) -> None:
        self._emit("debug", "unkey_resource_read", resource_id=resource_id)

    def resource_read_failed(self, resource_id: str, error: str) -> None:
        self._emit(
            "error", "unkey_resource_read_failed", resource_id=resource_id, error=error
        )

    def resource_updated(self, resource_id: str, changed_fields: list[str]) -> None:
        self._emit(
            "info",
            "unkey_resource_updated",
            resource_id=resource_id,
            changed_fields=changed_fields,
        )

    def resource_update_skipped(self, resource_id: str) -> None:
        self._emit("debug", "unkey_resource_update_skipped", resource_id=resource_id)

    def resource_update_failed(self, resource_id: str, error: str) -> None:
        self._emit(
            "error", "unkey_resource_update_failed", resource_id=resource_id, error=error
        )

    def resource_deleted(self, resource_id: str, permanent: bool = False) -> None:
        self._emit(
            "info",
            "unkey_resource_deleted",
            resource_id=resource_id,
            permanent=permanent,
        )

    def resource_deletion_failed(self, resource_id: str, error: str) -> None:
        self._emit(
            "error",
            "unkey_resource_deletion_failed",
            resource_id=resource_id,
            error=error,
        )

    def invalid_configuration(self, attribute: str, reason: str) -> None:
        self._emit(
            "warning",
            "unkey_resource_invalid_configuration",
            attribute=attribute,
            reason=reason,
        )

    def unexpected_provider_data(self, received_type: str) -> None:
        self._emit(
            "error",
            "unkey_resource_unexpected_provider_data",
            received_type=received_type,
        )
