"""Handler for the ``unkey_permission`` resource."""

from __future__ import annotations

from unkey_provider.domain.models import PermissionResourceModel
from unkey_provider.framework.resource import (
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    ReadRequest,
    ReadResponse,
)
from unkey_provider.framework.schema import Schema
from unkey_provider.framework.values import known_or_none
from unkey_provider.infrastructure.unkey.components import (
    CreatePermissionRequest,
    DeletePermissionRequest,
    GetPermissionRequest,
)
from unkey_provider.resources.base import OPERATION_ERRORS, UnkeyResource
from unkey_provider.schemas import permission_schema


class PermissionResource(UnkeyResource[PermissionResourceModel]):
    """A workspace permission. Every attribute forces replacement."""

    type_suffix = "permission"
    display_name = "Permission"

    def schema(self) -> Schema:
        return permission_schema()

    def create(
        self, request: CreateRequest[PermissionResourceModel]
    ) -> CreateResponse[PermissionResourceModel]:
        response: CreateResponse[PermissionResourceModel] = CreateResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        plan = request.plan
        body = CreatePermissionRequest(
            name=plan.name,
            slug=plan.slug,
            description=known_or_none(plan.description),
        )
        try:
            created = client.permissions.create_permission(body)
        except OPERATION_ERRORS as e:
            self._creation_failed(response.diagnostics, e)
            return response

        self._probe.resource_created(resource_id=created.permission_id)
        response.state = PermissionResourceModel(
            name=plan.name,
            slug=plan.slug,
            description=body.description,
            id=created.permission_id,
        )
        return response

    def read(
        self, request: ReadRequest[PermissionResourceModel]
    ) -> ReadResponse[PermissionResourceModel]:
        response: ReadResponse[PermissionResourceModel] = ReadResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        permission_id = str(request.state.id)
        try:
            data = client.permissions.get_permission(
                GetPermissionRequest(permission=permission_id)
            )
        except OPERATION_ERRORS as e:
            self._read_failed(response.diagnostics, permission_id, e)
            return response

        self._probe.resource_read(resource_id=permission_id)
        response.state = PermissionResourceModel(
            name=data.name,
            slug=data.slug,
            description=data.description,
            id=data.id,
        )
        return response

    def delete(self, request: DeleteRequest[PermissionResourceModel]) -> DeleteResponse:
        response = DeleteResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        permission_id = str(request.state.id)
        try:
            client.permissions.delete_permission(
                DeletePermissionRequest(permission=permission_id)
            )
        except OPERATION_ERRORS as e:
            self._deletion_failed(response.diagnostics, permission_id, e)
            return response

        self._probe.resource_deleted(resource_id=permission_id)
        return response
