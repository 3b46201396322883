"""Provider root: credentials, the shared client and the resource registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from unkey_provider.framework.diagnostics import Diagnostics
from unkey_provider.framework.resource import MetadataResponse
from unkey_provider.framework.schema import Schema, StringAttribute
from unkey_provider.framework.values import UnknownValue, is_unknown
from unkey_provider.infrastructure.logging import configure_logging
from unkey_provider.infrastructure.settings import UnkeySettings, get_unkey_settings
from unkey_provider.infrastructure.unkey import UnkeyClient
from unkey_provider.observability import DefaultProviderProbe, ProviderProbe
from unkey_provider.resources import (
    ApiResource,
    IdentityResource,
    KeyResource,
    PermissionResource,
    RoleResource,
    UnkeyResource,
)

ROOT_KEY_ENV_VAR = "UNKEY_ROOT_KEY"


@dataclass
class ProviderModel:
    """Provider configuration block."""

    root_key: str | None | UnknownValue = None


@dataclass(frozen=True)
class ProviderConfigureRequest:
    config: ProviderModel = field(default_factory=ProviderModel)


@dataclass
class ProviderConfigureResponse:
    """Outcome of configuring the provider.

    ``resource_data`` is the client the host hands to every resource's
    ``configure`` step. It stays None when configuration failed.
    """

    resource_data: UnkeyClient | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class UnkeyProvider:
    """The ``unkey`` provider."""

    type_name = "unkey"

    def __init__(
        self,
        version: str,
        settings: UnkeySettings | None = None,
        probe: ProviderProbe | None = None,
        client_factory: Callable[..., UnkeyClient] = UnkeyClient,
    ):
        self._version = version
        self._settings = settings if settings is not None else get_unkey_settings()
        self._probe = probe or DefaultProviderProbe()
        self._client_factory = client_factory
        self._clients: list[UnkeyClient] = []

    @property
    def version(self) -> str:
        return self._version

    def metadata(self) -> MetadataResponse:
        return MetadataResponse(type_name=self.type_name, version=self._version)

    def schema(self) -> Schema:
        return Schema(
            description="Interact with Unkey.",
            attributes={
                "root_key": StringAttribute(
                    description=(
                        "Root key for Unkey API. May also be provided via "
                        f"{ROOT_KEY_ENV_VAR} environment variable."
                    ),
                    optional=True,
                    sensitive=True,
                ),
            },
        )

    def configure(self, request: ProviderConfigureRequest) -> ProviderConfigureResponse:
        """Resolve the root key and build the shared client.

        A root key in the configuration block takes precedence over the
        environment, even when it is empty.
        """
        response = ProviderConfigureResponse()
        self._probe.configuring()

        configured_key = request.config.root_key
        if is_unknown(configured_key):
            self._probe.root_key_unknown()
            response.diagnostics.add_attribute_error(
                "root_key",
                "Unknown Unkey API Root Key",
                "The provider cannot create the Unkey API client as there is an "
                "unknown configuration value for the Unkey API root key. Either "
                "target apply the source of the value first, set the value "
                "statically in the configuration, or use the "
                f"{ROOT_KEY_ENV_VAR} environment variable.",
            )
            return response

        if configured_key is not None:
            root_key, source = configured_key, "config"
        elif self._settings.root_key is not None:
            root_key, source = self._settings.root_key.get_secret_value(), "environment"
        else:
            root_key, source = "", "none"

        if not root_key:
            self._probe.root_key_missing()
            response.diagnostics.add_attribute_error(
                "root_key",
                "Missing Unkey API Root Key",
                "The provider cannot create the Unkey API client as there is a "
                "missing or empty value for the Unkey API root key. Set the "
                f"root_key value in the configuration or use the {ROOT_KEY_ENV_VAR} "
                "environment variable. If either is already set, ensure the value "
                "is not empty.",
            )
            return response

        client = self._client_factory(
            root_key=root_key,
            base_url=self._settings.base_url,
            timeout=self._settings.timeout_seconds,
        )
        self._clients.append(client)
        response.resource_data = client
        self._probe.configured(
            base_url=self._settings.base_url, root_key_source=source
        )
        return response

    def resources(self) -> list[Callable[..., UnkeyResource]]:
        return [
            ApiResource,
            KeyResource,
            PermissionResource,
            RoleResource,
            IdentityResource,
        ]

    def build_resources(self, client: UnkeyClient) -> list[UnkeyResource]:
        """Instantiate every resource with the shared client injected."""
        return [factory(client=client) for factory in self.resources()]

    def close(self) -> None:
        """Close every client built by ``configure``.

        The host calls this once when it stops the provider. Resources still
        holding a closed client fail their next request.
        """
        while self._clients:
            self._clients.pop().close()


def new(version: str) -> Callable[[], UnkeyProvider]:
    """Return a factory the host calls to obtain a provider instance.

    Logging is configured on the first call unless the host already did.
    """

    def factory() -> UnkeyProvider:
        settings = get_unkey_settings()
        if not structlog.is_configured():
            configure_logging(
                level=settings.log_level_number, force_json=settings.log_json
            )
        return UnkeyProvider(version=version, settings=settings)

    return factory
