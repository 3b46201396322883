"""Shared behaviour of every Unkey resource handler.

Handlers receive the shared ``UnkeyClient`` either through the constructor or
through the host's ``configure`` step. Remote and conversion failures are
turned into diagnostics here so that concrete handlers only describe the
mapping between state and API bodies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from unkey_provider.conversions import ConversionError, map_to_string, string_to_map
from unkey_provider.framework.diagnostics import Diagnostics
from unkey_provider.framework.resource import (
    ConfigureRequest,
    ConfigureResponse,
    MetadataRequest,
    MetadataResponse,
    UpdateRequest,
    UpdateResponse,
)
from unkey_provider.framework.schema import Schema
from unkey_provider.framework.values import is_known
from unkey_provider.infrastructure.unkey import UnkeyClient, UnkeyError
from unkey_provider.resources.observability import DefaultResourceProbe, ResourceProbe
from unkey_provider.shared_kernel.observability_context import ObservationContext

M = TypeVar("M")

# Failures reported as diagnostics; anything else propagates.
OPERATION_ERRORS = (UnkeyError, ConversionError)


class UnkeyResource(ABC, Generic[M]):
    """Base class for resource handlers.

    Subclasses set ``type_suffix`` (appended to the provider type name) and
    ``display_name`` (used in diagnostics), and implement the CRUD operations.
    """

    type_suffix: ClassVar[str]
    display_name: ClassVar[str]

    def __init__(
        self,
        client: UnkeyClient | None = None,
        probe: ResourceProbe | None = None,
    ):
        self._client = client
        self._probe = probe or DefaultResourceProbe(
            context=ObservationContext(resource_type=f"unkey_{self.type_suffix}")
        )

    @property
    def client(self) -> UnkeyClient | None:
        return self._client

    def metadata(self, request: MetadataRequest) -> MetadataResponse:
        return MetadataResponse(
            type_name=f"{request.provider_type_name}_{self.type_suffix}"
        )

    @abstractmethod
    def schema(self) -> Schema:
        """Attribute schema of the resource."""

    def configure(self, request: ConfigureRequest) -> ConfigureResponse:
        """Accept the client published by the provider.

        The host may call this before the provider is configured, in which
        case ``provider_data`` is None and nothing happens.
        """
        response = ConfigureResponse()
        data = request.provider_data
        if data is None:
            return response

        if not isinstance(data, UnkeyClient):
            self._probe.unexpected_provider_data(received_type=type(data).__name__)
            response.diagnostics.add_error(
                "Unexpected Resource Configure Type",
                f"Expected UnkeyClient, got: {type(data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return response

        self._client = data
        return response

    def update(self, request: UpdateRequest[M]) -> UpdateResponse[M]:
        """Keep the stored state.

        Resources without an update endpoint mark every attribute as
        requiring replacement, so the host never sends a real change here.
        """
        return UpdateResponse(state=request.state)

    def _require_client(self, diagnostics: Diagnostics) -> UnkeyClient | None:
        if self._client is None:
            diagnostics.add_error(
                "Unconfigured Unkey Client",
                f"The {self.display_name} resource was used before the provider "
                "configured an Unkey client. Please report this issue to the "
                "provider developers.",
            )
        return self._client

    # Diagnostics for failed operations

    def _creation_failed(self, diagnostics: Diagnostics, error: Exception) -> None:
        self._probe.resource_creation_failed(error=str(error))
        diagnostics.add_error(
            f"Error creating {self.display_name}",
            f"Could not create {self.display_name}, unexpected error: {error}",
        )

    def _read_failed(
        self, diagnostics: Diagnostics, resource_id: str, error: Exception
    ) -> None:
        self._probe.resource_read_failed(resource_id=resource_id, error=str(error))
        diagnostics.add_error(
            f"Error Reading Unkey {self.display_name}",
            f"Could not read Unkey {self.display_name} ID {resource_id}: {error}",
        )

    def _update_failed(
        self, diagnostics: Diagnostics, resource_id: str, error: Exception
    ) -> None:
        self._probe.resource_update_failed(resource_id=resource_id, error=str(error))
        diagnostics.add_error(
            f"Error updating {self.display_name}",
            f"Could not update {self.display_name} {resource_id}: {error}",
        )

    def _read_after_update_failed(
        self, diagnostics: Diagnostics, resource_id: str, error: Exception
    ) -> None:
        self._probe.resource_read_failed(resource_id=resource_id, error=str(error))
        diagnostics.add_error(
            f"Error reading updated {self.display_name}",
            f"Could not read {self.display_name} after update {resource_id}: {error}",
        )

    def _deletion_failed(
        self, diagnostics: Diagnostics, resource_id: str, error: Exception
    ) -> None:
        self._probe.resource_deletion_failed(resource_id=resource_id, error=str(error))
        diagnostics.add_error(
            f"Error Deleting Unkey {self.display_name}",
            f"Could not delete {self.display_name}, unexpected error: {error}",
        )

    def _decode_meta(self, value: Any, diagnostics: Diagnostics) -> dict[str, Any] | None:
        """Decode the ``meta`` attribute, reporting invalid JSON.

        Returns None both for null meta and on failure; callers check
        ``diagnostics.has_error()`` to tell them apart.
        """
        try:
            return string_to_map(value)
        except ConversionError as e:
            self._probe.invalid_configuration(attribute="meta", reason=str(e))
            diagnostics.add_attribute_error("meta", "Invalid JSON in meta", str(e))
            return None


def meta_from_api(stored: Any, remote: Mapping[str, Any] | None) -> str | None:
    """Remote meta as a state string.

    The stored string is kept when it decodes to the same object, so that
    formatting chosen in configuration does not show up as drift.
    """
    if is_known(stored) and (string_to_map(stored) or None) == (remote or None):
        return stored
    return map_to_string(remote)
