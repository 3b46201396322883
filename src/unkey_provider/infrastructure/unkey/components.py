"""Pydantic models for Unkey v2 request and response bodies.

Python attributes are snake_case; the wire format is camelCase. Request
bodies decide which fields reach the wire through ``to_payload``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from unkey_provider.domain.value_objects import RefillInterval


class UnkeyModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class RequestBody(UnkeyModel):
    """A request body that omits null fields."""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PartialRequestBody(UnkeyModel):
    """A request body that sends exactly the fields that were explicitly set.

    Unset fields are left untouched remotely; fields set to ``None`` or an
    empty list are sent as such and clear the remote value.
    """

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    @property
    def changed_fields(self) -> list[str]:
        identifiers = self.identifier_fields()
        return sorted(name for name in self.model_fields_set if name not in identifiers)

    @property
    def has_changes(self) -> bool:
        return bool(self.changed_fields)

    @classmethod
    def identifier_fields(cls) -> frozenset[str]:
        return frozenset()


class EmptyData(UnkeyModel):
    pass


class ResponseMeta(UnkeyModel):
    request_id: str | None = None


# Nested shapes


class KeyCreditsRefill(UnkeyModel):
    interval: RefillInterval
    amount: int
    refill_day: int | None = None


class KeyCreditsData(UnkeyModel):
    remaining: int | None = None
    refill: KeyCreditsRefill | None = None


class UpdateKeyCreditsRefill(UnkeyModel):
    interval: RefillInterval | None = None
    amount: int | None = None
    refill_day: int | None = None


class UpdateKeyCreditsData(UnkeyModel):
    remaining: int | None = None
    refill: UpdateKeyCreditsRefill | None = None


class RatelimitRequest(UnkeyModel):
    name: str
    limit: int
    duration: int
    auto_apply: bool = False


class RatelimitResponse(UnkeyModel):
    id: str | None = None
    name: str
    limit: int
    duration: int
    auto_apply: bool = False


# APIs


class CreateApiRequest(RequestBody):
    name: str


class CreateApiResponseData(UnkeyModel):
    api_id: str


class GetApiRequest(RequestBody):
    api_id: str


class ApiResponseData(UnkeyModel):
    id: str
    name: str


class DeleteApiRequest(RequestBody):
    api_id: str


# Keys


class CreateKeyRequest(RequestBody):
    api_id: str
    prefix: str | None = None
    name: str | None = None
    byte_length: int | None = None
    external_id: str | None = None
    meta: dict[str, Any] | None = None
    roles: list[str] | None = None
    permissions: list[str] | None = None
    expires: int | None = None
    credits: KeyCreditsData | None = None
    ratelimits: list[RatelimitRequest] | None = None
    enabled: bool | None = None
    recoverable: bool | None = None


class CreateKeyResponseData(UnkeyModel):
    key_id: str
    key: str


class GetKeyRequest(RequestBody):
    key_id: str
    decrypt: bool | None = None


class KeyIdentity(UnkeyModel):
    id: str | None = None
    external_id: str
    meta: dict[str, Any] | None = None


class KeyResponseData(UnkeyModel):
    key_id: str
    start: str | None = None
    enabled: bool = True
    name: str | None = None
    meta: dict[str, Any] | None = None
    created_at: int | None = None
    updated_at: int | None = None
    expires: int | None = None
    credits: KeyCreditsData | None = None
    identity: KeyIdentity | None = None
    permissions: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    ratelimits: list[RatelimitResponse] = Field(default_factory=list)


class UpdateKeyRequest(PartialRequestBody):
    key_id: str
    name: str | None = None
    external_id: str | None = None
    meta: dict[str, Any] | None = None
    expires: int | None = None
    credits: UpdateKeyCreditsData | None = None
    ratelimits: list[RatelimitRequest] | None = None
    enabled: bool | None = None
    roles: list[str] | None = None
    permissions: list[str] | None = None

    @classmethod
    def identifier_fields(cls) -> frozenset[str]:
        return frozenset({"key_id"})


class DeleteKeyRequest(RequestBody):
    key_id: str
    permanent: bool = False


# Permissions and roles


class CreatePermissionRequest(RequestBody):
    name: str
    slug: str
    description: str | None = None


class CreatePermissionResponseData(UnkeyModel):
    permission_id: str


class GetPermissionRequest(RequestBody):
    permission: str


class PermissionResponseData(UnkeyModel):
    id: str
    name: str
    slug: str
    description: str | None = None


class DeletePermissionRequest(RequestBody):
    permission: str


class CreateRoleRequest(RequestBody):
    name: str
    description: str | None = None


class CreateRoleResponseData(UnkeyModel):
    role_id: str


class GetRoleRequest(RequestBody):
    role: str


class RoleResponseData(UnkeyModel):
    id: str
    name: str
    description: str | None = None


class DeleteRoleRequest(RequestBody):
    role: str


# Identities


class CreateIdentityRequest(RequestBody):
    external_id: str
    meta: dict[str, Any] | None = None
    ratelimits: list[RatelimitRequest] | None = None


class CreateIdentityResponseData(UnkeyModel):
    identity_id: str


class GetIdentityRequest(RequestBody):
    identity: str


class IdentityResponseData(UnkeyModel):
    id: str
    external_id: str
    meta: dict[str, Any] | None = None
    ratelimits: list[RatelimitResponse] = Field(default_factory=list)


class UpdateIdentityRequest(PartialRequestBody):
    identity: str
    meta: dict[str, Any] | None = None
    ratelimits: list[RatelimitRequest] | None = None

    @classmethod
    def identifier_fields(cls) -> frozenset[str]:
        return frozenset({"identity"})


class DeleteIdentityRequest(RequestBody):
    identity: str
