"""Handler for the ``unkey_key`` resource.

The plaintext key is only known right after creation. Reads never touch it,
so it survives in state exactly as the create call returned it.
"""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any

from unkey_provider.conversions import (
    credits_from_api,
    credits_to_api,
    credits_to_update_api,
    ratelimits_from_api,
    ratelimits_to_api,
    slice_to_string_list,
    string_list_to_slice,
    string_to_map,
)
from unkey_provider.domain.models import KeyResourceModel
from unkey_provider.framework.resource import (
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    ReadRequest,
    ReadResponse,
    UpdateRequest,
    UpdateResponse,
)
from unkey_provider.framework.schema import Schema
from unkey_provider.framework.values import known_or_none
from unkey_provider.infrastructure.unkey import UnkeyClient
from unkey_provider.infrastructure.unkey.components import (
    CreateKeyRequest,
    DeleteKeyRequest,
    GetKeyRequest,
    UpdateKeyRequest,
)
from unkey_provider.resources.base import (
    OPERATION_ERRORS,
    UnkeyResource,
    meta_from_api,
)
from unkey_provider.schemas import key_schema

RFC850_FORMAT = "%A, %d-%b-%y %H:%M:%S UTC"


def _timestamp() -> str:
    return datetime.now(UTC).strftime(RFC850_FORMAT)


class KeyResource(UnkeyResource[KeyResourceModel]):
    type_suffix = "key"
    display_name = "Key"

    def schema(self) -> Schema:
        return key_schema()

    def create(
        self, request: CreateRequest[KeyResourceModel]
    ) -> CreateResponse[KeyResourceModel]:
        response: CreateResponse[KeyResourceModel] = CreateResponse()
        plan = request.plan

        meta = self._decode_meta(plan.meta, response.diagnostics)
        if response.diagnostics.has_error():
            return response

        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        try:
            body = CreateKeyRequest(
                api_id=plan.api_id,
                prefix=plan.prefix,
                name=known_or_none(plan.name),
                byte_length=plan.byte_length,
                external_id=known_or_none(plan.external_id),
                meta=meta,
                roles=string_list_to_slice(plan.roles),
                permissions=string_list_to_slice(plan.permissions),
                expires=known_or_none(plan.expires),
                credits=credits_to_api(plan.credits),
                ratelimits=ratelimits_to_api(plan.ratelimits),
                enabled=known_or_none(plan.enabled),
                recoverable=plan.recoverable,
            )
            created = client.keys.create_key(body)
        except OPERATION_ERRORS as e:
            self._creation_failed(response.diagnostics, e)
            return response

        self._probe.resource_created(resource_id=created.key_id)
        response.state = dataclasses.replace(
            plan,
            id=created.key_id,
            key=created.key,
            last_updated=_timestamp(),
        )
        return response

    def read(
        self, request: ReadRequest[KeyResourceModel]
    ) -> ReadResponse[KeyResourceModel]:
        response: ReadResponse[KeyResourceModel] = ReadResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        key_id = str(request.state.id)
        try:
            response.state = self._fetch(client, request.state)
        except OPERATION_ERRORS as e:
            self._read_failed(response.diagnostics, key_id, e)
            return response

        self._probe.resource_read(resource_id=key_id)
        return response

    def update(
        self, request: UpdateRequest[KeyResourceModel]
    ) -> UpdateResponse[KeyResourceModel]:
        """Send the fields that differ between plan and state, then re-read.

        Local-only attributes such as ``permanent_deletion`` never reach the
        API; when nothing else changed the update call is skipped.
        """
        response: UpdateResponse[KeyResourceModel] = UpdateResponse()
        plan, state = request.plan, request.state
        key_id = str(state.id)

        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        try:
            changes = self._changes(plan, state, response)
            if response.diagnostics.has_error():
                return response
            body = UpdateKeyRequest(key_id=key_id, **changes)
            if body.has_changes:
                client.keys.update_key(body)
        except OPERATION_ERRORS as e:
            self._update_failed(response.diagnostics, key_id, e)
            return response

        if body.has_changes:
            self._probe.resource_updated(
                resource_id=key_id, changed_fields=body.changed_fields
            )
        else:
            self._probe.resource_update_skipped(resource_id=key_id)

        desired = dataclasses.replace(plan, id=state.id, key=state.key)
        try:
            refreshed = self._fetch(client, desired)
        except OPERATION_ERRORS as e:
            self._read_after_update_failed(response.diagnostics, key_id, e)
            return response

        response.state = dataclasses.replace(refreshed, last_updated=_timestamp())
        return response

    def delete(self, request: DeleteRequest[KeyResourceModel]) -> DeleteResponse:
        response = DeleteResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        key_id = str(request.state.id)
        permanent = bool(request.state.permanent_deletion)
        try:
            client.keys.delete_key(DeleteKeyRequest(key_id=key_id, permanent=permanent))
        except OPERATION_ERRORS as e:
            self._deletion_failed(response.diagnostics, key_id, e)
            return response

        self._probe.resource_deleted(resource_id=key_id, permanent=permanent)
        return response

    def _changes(
        self,
        plan: KeyResourceModel,
        state: KeyResourceModel,
        response: UpdateResponse[KeyResourceModel],
    ) -> dict[str, Any]:
        """Collect update body fields that differ between plan and state.

        Cleared lists are sent as ``[]`` and cleared scalars or objects as
        null, so that clearing is distinguishable from leaving unchanged.
        """
        changes: dict[str, Any] = {}

        name = known_or_none(plan.name)
        if name is not None and name != state.name:
            changes["name"] = name

        enabled = known_or_none(plan.enabled)
        if enabled is not None and enabled != state.enabled:
            changes["enabled"] = enabled

        expires = known_or_none(plan.expires)
        if expires != known_or_none(state.expires):
            changes["expires"] = expires

        external_id = known_or_none(plan.external_id)
        if external_id != known_or_none(state.external_id):
            changes["external_id"] = external_id

        planned_meta = self._decode_meta(plan.meta, response.diagnostics)
        if response.diagnostics.has_error():
            return changes
        if (planned_meta or None) != (string_to_map(state.meta) or None):
            changes["meta"] = planned_meta

        for field in ("roles", "permissions"):
            planned = string_list_to_slice(getattr(plan, field)) or []
            stored = string_list_to_slice(getattr(state, field)) or []
            if planned != stored:
                changes[field] = planned

        credits = known_or_none(plan.credits)
        if credits != known_or_none(state.credits):
            changes["credits"] = credits_to_update_api(credits)

        ratelimits = known_or_none(plan.ratelimits) or []
        if ratelimits != (known_or_none(state.ratelimits) or []):
            changes["ratelimits"] = ratelimits_to_api(ratelimits)

        return changes

    def _fetch(self, client: UnkeyClient, current: KeyResourceModel) -> KeyResourceModel:
        """Overwrite remote-backed attributes of ``current`` from the API.

        A null ``enabled`` stays null while the key is enabled, which is
        the API default.
        """
        data = client.keys.get_key(GetKeyRequest(key_id=str(current.id)))

        enabled: bool | None = data.enabled
        if known_or_none(current.enabled) is None and data.enabled:
            enabled = None

        return dataclasses.replace(
            current,
            id=data.key_id,
            name=data.name,
            external_id=data.identity.external_id if data.identity else None,
            meta=meta_from_api(current.meta, data.meta),
            roles=slice_to_string_list(data.roles),
            permissions=slice_to_string_list(data.permissions),
            expires=data.expires,
            credits=credits_from_api(data.credits),
            ratelimits=ratelimits_from_api(data.ratelimits),
            enabled=enabled,
        )
