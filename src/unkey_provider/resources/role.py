"""Handler for the ``unkey_role`` resource."""

from __future__ import annotations

from unkey_provider.domain.models import RoleResourceModel
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
    CreateRoleRequest,
    DeleteRoleRequest,
    GetRoleRequest,
)
from unkey_provider.resources.base import OPERATION_ERRORS, UnkeyResource
from unkey_provider.schemas import role_schema


class RoleResource(UnkeyResource[RoleResourceModel]):
    type_suffix = "role"
    display_name = "Role"

    def schema(self) -> Schema:
        return role_schema()

    def create(
        self, request: CreateRequest[RoleResourceModel]
    ) -> CreateResponse[RoleResourceModel]:
        response: CreateResponse[RoleResourceModel] = CreateResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        plan = request.plan
        body = CreateRoleRequest(
            name=plan.name, description=known_or_none(plan.description)
        )
        try:
            created = client.permissions.create_role(body)
        except OPERATION_ERRORS as e:
            self._creation_failed(response.diagnostics, e)
            return response

        self._probe.resource_created(resource_id=created.role_id)
        response.state = RoleResourceModel(
            name=plan.name, description=body.description, id=created.role_id
        )
        return response

    def read(
        self, request: ReadRequest[RoleResourceModel]
    ) -> ReadResponse[RoleResourceModel]:
        response: ReadResponse[RoleResourceModel] = ReadResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        role_id = str(request.state.id)
        try:
            data = client.permissions.get_role(GetRoleRequest(role=role_id))
        except OPERATION_ERRORS as e:
            self._read_failed(response.diagnostics, role_id, e)
            return response

        self._probe.resource_read(resource_id=role_id)
        response.state = RoleResourceModel(
            name=data.name, description=data.description, id=data.id
        )
        return response

    def delete(self, request: DeleteRequest[RoleResourceModel]) -> DeleteResponse:
        response = DeleteResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        role_id = str(request.state.id)
        try:
            client.permissions.delete_role(DeleteRoleRequest(role=role_id))
        except OPERATION_ERRORS as e:
            self._deletion_failed(response.diagnostics, role_id, e)
            return response

        self._probe.resource_deleted(resource_id=role_id)
        return response
