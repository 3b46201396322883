"""Domain probe for provider configuration.

Following Domain-Oriented Observability patterns, this probe captures how
the provider resolves its credentials and builds the shared API client.
The root key itself is never passed to the probe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from unkey_provider.shared_kernel.observability_context import ObservationContext


class ProviderProbe(Protocol):
    """Domain probe for provider configuration."""

    def configuring(self) -> None:
        """Record that the host started configuring the provider."""
        ...

    def root_key_unknown(self) -> None:
        """Record that the root key depends on a value not known yet."""
        ...

    def root_key_missing(self) -> None:
        """Record that neither configuration nor environment had a root key."""
        ...

    def configured(self, base_url: str, root_key_source: str) -> None:
        """Record that the shared client was built."""
        ...

    def with_context(self, context: ObservationContext) -> ProviderProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultProviderProbe:
    """Default implementation of ProviderProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultProviderProbe:
        return DefaultProviderProbe(logger=self._logger, context=context)

    def configuring(self) -> None:
        self._logger.info("unkey_provider_configuring", **self._get_context_kwargs())

    def root_key_unknown(self) -> None:
        self._logger.error(
            "unkey_provider_root_key_unknown", **self._get_context_kwargs()
        )

    def root_key_missing(self) -> None:
        self._logger.error(
            "unkey_provider_root_key_missing", **self._get_context_kwargs()
        )

    def configured(self, base_url: str, root_key_source: str) -> None:
        self._logger.info(
            "unkey_provider_configured",
            base_url=base_url,
            root_key_source=root_key_source,
            **self._get_context_kwargs(),
        )
