"""Request and response envelopes exchanged with the plugin host.

Each operation receives a typed request and returns a typed response. A
response with ``state`` left as ``None`` tells the host to keep its prior
state, which is what every failed operation does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

from unkey_provider.framework.diagnostics import Diagnostics
from unkey_provider.framework.schema import Schema

M = TypeVar("M")


@dataclass(frozen=True)
class MetadataRequest:
    provider_type_name: str


@dataclass(frozen=True)
class MetadataResponse:
    type_name: str
    version: str | None = None


@dataclass(frozen=True)
class ConfigureRequest:
    provider_data: Any = None


@dataclass
class ConfigureResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(frozen=True)
class CreateRequest(Generic[M]):
    plan: M


@dataclass
class CreateResponse(Generic[M]):
    state: M | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(frozen=True)
class ReadRequest(Generic[M]):
    state: M


@dataclass
class ReadResponse(Generic[M]):
    state: M | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(frozen=True)
class UpdateRequest(Generic[M]):
    plan: M
    state: M


@dataclass
class UpdateResponse(Generic[M]):
    state: M | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(frozen=True)
class DeleteRequest(Generic[M]):
    state: M


@dataclass
class DeleteResponse:
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class Resource(Protocol[M]):
    """Operations the host invokes on a managed resource."""

    def metadata(self, request: MetadataRequest) -> MetadataResponse: ...

    def schema(self) -> Schema: ...

    def configure(self, request: ConfigureRequest) -> ConfigureResponse: ...

    def create(self, request: CreateRequest[M]) -> CreateResponse[M]: ...

    def read(self, request: ReadRequest[M]) -> ReadResponse[M]: ...

    def update(self, request: UpdateRequest[M]) -> UpdateResponse[M]: ...

    def delete(self, request: DeleteRequest[M]) -> DeleteResponse: ...
