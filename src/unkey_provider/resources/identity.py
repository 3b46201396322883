"""Handler for the ``unkey_identity`` resource."""

from __future__ import annotations

import dataclasses
from typing import Any

from unkey_provider.conversions import (
    ratelimits_from_api,
    ratelimits_to_api,
    string_to_map,
)
from unkey_provider.domain.models import IdentityResourceModel
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
    CreateIdentityRequest,
    DeleteIdentityRequest,
    GetIdentityRequest,
    UpdateIdentityRequest,
)
from unkey_provider.resources.base import (
    OPERATION_ERRORS,
    UnkeyResource,
    meta_from_api,
)
from unkey_provider.schemas import identity_schema


class IdentityResource(UnkeyResource[IdentityResourceModel]):
    """An identity grouping the keys of one user or organization.

    Only ``meta`` and ``ratelimits`` change in place; a new ``external_id``
    replaces the identity.
    """

    type_suffix = "identity"
    display_name = "Identity"

    def schema(self) -> Schema:
        return identity_schema()

    def create(
        self, request: CreateRequest[IdentityResourceModel]
    ) -> CreateResponse[IdentityResourceModel]:
        response: CreateResponse[IdentityResourceModel] = CreateResponse()
        plan = request.plan

        meta = self._decode_meta(plan.meta, response.diagnostics)
        if response.diagnostics.has_error():
            return response

        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        try:
            body = CreateIdentityRequest(
                external_id=plan.external_id,
                meta=meta,
                ratelimits=ratelimits_to_api(plan.ratelimits),
            )
            created = client.identities.create_identity(body)
        except OPERATION_ERRORS as e:
            self._creation_failed(response.diagnostics, e)
            return response

        self._probe.resource_created(resource_id=created.identity_id)
        response.state = dataclasses.replace(plan, id=created.identity_id)
        return response

    def read(
        self, request: ReadRequest[IdentityResourceModel]
    ) -> ReadResponse[IdentityResourceModel]:
        response: ReadResponse[IdentityResourceModel] = ReadResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        identity_id = str(request.state.id)
        try:
            response.state = self._fetch(client, request.state)
        except OPERATION_ERRORS as e:
            self._read_failed(response.diagnostics, identity_id, e)
            return response

        self._probe.resource_read(resource_id=identity_id)
        return response

    def update(
        self, request: UpdateRequest[IdentityResourceModel]
    ) -> UpdateResponse[IdentityResourceModel]:
        response: UpdateResponse[IdentityResourceModel] = UpdateResponse()
        plan, state = request.plan, request.state
        identity_id = str(state.id)

        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        try:
            changes = self._changes(plan, state, response)
            if response.diagnostics.has_error():
                return response
            body = UpdateIdentityRequest(identity=identity_id, **changes)
            if body.has_changes:
                client.identities.update_identity(body)
        except OPERATION_ERRORS as e:
            self._update_failed(response.diagnostics, identity_id, e)
            return response

        if body.has_changes:
            self._probe.resource_updated(
                resource_id=identity_id, changed_fields=body.changed_fields
            )
        else:
            self._probe.resource_update_skipped(resource_id=identity_id)

        try:
            response.state = self._fetch(
                client, dataclasses.replace(plan, id=state.id)
            )
        except OPERATION_ERRORS as e:
            self._read_after_update_failed(response.diagnostics, identity_id, e)
        return response

    def delete(self, request: DeleteRequest[IdentityResourceModel]) -> DeleteResponse:
        response = DeleteResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        identity_id = str(request.state.id)
        try:
            client.identities.delete_identity(
                DeleteIdentityRequest(identity=identity_id)
            )
        except OPERATION_ERRORS as e:
            self._deletion_failed(response.diagnostics, identity_id, e)
            return response

        self._probe.resource_deleted(resource_id=identity_id)
        return response

    def _changes(
        self,
        plan: IdentityResourceModel,
        state: IdentityResourceModel,
        response: UpdateResponse[IdentityResourceModel],
    ) -> dict[str, Any]:
        changes: dict[str, Any] = {}

        planned_meta = self._decode_meta(plan.meta, response.diagnostics)
        if response.diagnostics.has_error():
            return changes
        if (planned_meta or None) != (string_to_map(state.meta) or None):
            changes["meta"] = planned_meta

        ratelimits = known_or_none(plan.ratelimits) or []
        if ratelimits != (known_or_none(state.ratelimits) or []):
            changes["ratelimits"] = ratelimits_to_api(ratelimits)

        return changes

    def _fetch(
        self, client: UnkeyClient, current: IdentityResourceModel
    ) -> IdentityResourceModel:
        data = client.identities.get_identity(
            GetIdentityRequest(identity=str(current.id))
        )
        return dataclasses.replace(
            current,
            id=data.id,
            external_id=data.external_id,
            meta=meta_from_api(current.meta, data.meta),
            ratelimits=ratelimits_from_api(data.ratelimits),
        )
