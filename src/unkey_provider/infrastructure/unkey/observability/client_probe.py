"""Domain probe for Unkey API client operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to calls against the Unkey API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from unkey_provider.shared_kernel.observability_context import ObservationContext


class UnkeyClientProbe(Protocol):
    """Domain probe for Unkey API client operations."""

    def request_started(self, operation: str) -> None:
        """Record that a request to the API is about to be sent."""
        ...

    def request_succeeded(
        self, operation: str, status_code: int, request_id: str | None
    ) -> None:
        """Record that the API answered successfully."""
        ...

    def request_failed(
        self,
        operation: str,
        reason: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        """Record that a request failed in transport, status or decoding."""
        ...

    def with_context(self, context: ObservationContext) -> UnkeyClientProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUnkeyClientProbe:
    """Default implementation of UnkeyClientProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUnkeyClientProbe:
        """Create a new probe with observation context bound."""
        return DefaultUnkeyClientProbe(logger=self._logger, context=context)

    def request_started(self, operation: str) -> None:
        """Record that a request to the API is about to be sent."""
        self._logger.debug(
            "unkey_request_started",
            operation=operation,
            **self._get_context_kwargs(),
        )

    def request_succeeded(
        self, operation: str, status_code: int, request_id: str | None
    ) -> None:
        """Record that the API answered successfully."""
        self._logger.debug(
            "unkey_request_succeeded",
            operation=operation,
            status_code=status_code,
            unkey_request_id=request_id,
            **self._get_context_kwargs(),
        )

    def request_failed(
        self,
        operation: str,
        reason: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        """Record that a request failed in transport, status or decoding."""
        self._logger.error(
            "unkey_request_failed",
            operation=operation,
            reason=reason,
            status_code=status_code,
            unkey_request_id=request_id,
            **self._get_context_kwargs(),
        )
