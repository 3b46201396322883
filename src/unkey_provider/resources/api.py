"""Handler for the ``unkey_api`` resource."""

from __future__ import annotations

from unkey_provider.domain.models import ApiResourceModel
from unkey_provider.framework.resource import (
    CreateRequest,
    CreateResponse,
    DeleteRequest,
    DeleteResponse,
    ReadRequest,
    ReadResponse,
)
from unkey_provider.framework.schema import Schema
from unkey_provider.infrastructure.unkey import UnkeyClient
from unkey_provider.infrastructure.unkey.components import (
    CreateApiRequest,
    DeleteApiRequest,
    GetApiRequest,
)
from unkey_provider.resources.base import OPERATION_ERRORS, UnkeyResource
from unkey_provider.schemas import api_schema


class ApiResource(UnkeyResource[ApiResourceModel]):
    """An API namespace. APIs cannot be changed in place."""

    type_suffix = "api"
    display_name = "API"

    def schema(self) -> Schema:
        return api_schema()

    def create(
        self, request: CreateRequest[ApiResourceModel]
    ) -> CreateResponse[ApiResourceModel]:
        response: CreateResponse[ApiResourceModel] = CreateResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        plan = request.plan
        try:
            created = client.apis.create_api(CreateApiRequest(name=plan.name))
        except OPERATION_ERRORS as e:
            self._creation_failed(response.diagnostics, e)
            return response

        self._probe.resource_created(resource_id=created.api_id)
        response.state = ApiResourceModel(name=plan.name, id=created.api_id)
        return response

    def read(
        self, request: ReadRequest[ApiResourceModel]
    ) -> ReadResponse[ApiResourceModel]:
        response: ReadResponse[ApiResourceModel] = ReadResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        api_id = str(request.state.id)
        try:
            response.state = self._fetch(client, api_id)
        except OPERATION_ERRORS as e:
            self._read_failed(response.diagnostics, api_id, e)
            return response

        self._probe.resource_read(resource_id=api_id)
        return response

    def delete(self, request: DeleteRequest[ApiResourceModel]) -> DeleteResponse:
        response = DeleteResponse()
        client = self._require_client(response.diagnostics)
        if client is None:
            return response

        api_id = str(request.state.id)
        try:
            client.apis.delete_api(DeleteApiRequest(api_id=api_id))
        except OPERATION_ERRORS as e:
            self._deletion_failed(response.diagnostics, api_id, e)
            return response

        self._probe.resource_deleted(resource_id=api_id)
        return response

    def _fetch(self, client: UnkeyClient, api_id: str) -> ApiResourceModel:
        data = client.apis.get_api(GetApiRequest(api_id=api_id))
        return ApiResourceModel(name=data.name, id=data.id)
