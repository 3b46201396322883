"""Unkey v2 API client.

Every operation is a JSON ``POST`` to ``/v2/<namespace>.<operation>``
authenticated with the root key as a bearer token. The client holds no
mutable state after construction and can be shared by all resources.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from unkey_provider.infrastructure.unkey import components as c
from unkey_provider.infrastructure.unkey.exceptions import (
    UnkeyAPIError,
    UnkeyConnectionError,
    UnkeyNotFoundError,
    UnkeyResponseError,
)
from unkey_provider.infrastructure.unkey.observability import (
    DefaultUnkeyClientProbe,
    UnkeyClientProbe,
)

DEFAULT_BASE_URL = "https://api.unkey.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
DISTRIBUTION_NAME = "terraform-provider-unkey"

T = TypeVar("T", bound=c.UnkeyModel)


def _user_agent() -> str:
    try:
        return f"{DISTRIBUTION_NAME}/{version(DISTRIBUTION_NAME)}"
    except PackageNotFoundError:
        return f"{DISTRIBUTION_NAME}/dev"


USER_AGENT = _user_agent()


class UnkeyClient:
    """Synchronous client for the Unkey v2 API.

    Operations are grouped by namespace the same way the API groups them:
    ``client.apis``, ``client.keys``, ``client.permissions`` (permissions and
    roles) and ``client.identities``.
    """

    def __init__(
        self,
        root_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        probe: UnkeyClientProbe | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            root_key: Unkey root key used as bearer token.
            base_url: API base URL.
            timeout: Per-request timeout in seconds.
            probe: Optional domain probe for observability.
            http_client: Optional pre-built httpx client. When given, the
                caller owns it and ``close`` leaves it open.
        """
        self._root_key = root_key
        self._base_url = base_url.rstrip("/")
        self._probe = probe or DefaultUnkeyClientProbe()
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

        self.apis = ApisService(self)
        self.keys = KeysService(self)
        self.permissions = PermissionsService(self)
        self.identities = IdentitiesService(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def _request_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._root_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def __enter__(self) -> UnkeyClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def call(
        self,
        operation: str,
        body: c.RequestBody | c.PartialRequestBody,
        response_model: type[T],
    ) -> T:
        """Send one request and decode the ``data`` member of the envelope.

        Args:
            operation: Namespaced operation name, e.g. ``keys.createKey``.
            body: Request body model.
            response_model: Model the ``data`` member is validated against.

        Raises:
            UnkeyConnectionError: If no HTTP response was received.
            UnkeyNotFoundError: If the API answered 404.
            UnkeyAPIError: For any other non-2xx answer.
            UnkeyResponseError: If a 2xx body cannot be decoded.
        """
        self._probe.request_started(operation=operation)

        try:
            response = self._http.post(
                f"{self._base_url}/v2/{operation}",
                json=body.to_payload(),
                headers=self._request_headers,
            )
        except httpx.HTTPError as e:
            self._probe.request_failed(operation=operation, reason=repr(e))
            raise UnkeyConnectionError(f"Failed to call {operation}: {e}") from e

        if not response.is_success:
            error = _error_from_response(response)
            self._probe.request_failed(
                operation=operation,
                reason=error.title,
                status_code=response.status_code,
                request_id=error.request_id,
            )
            raise error

        try:
            payload = response.json()
            meta = c.ResponseMeta.model_validate(payload.get("meta") or {})
            data = response_model.model_validate(payload.get("data") or {})
        except (ValueError, AttributeError, ValidationError) as e:
            self._probe.request_failed(
                operation=operation,
                reason=f"malformed response: {e}",
                status_code=response.status_code,
            )
            raise UnkeyResponseError(
                f"Unexpected response body from {operation}: {e}"
            ) from e

        self._probe.request_succeeded(
            operation=operation,
            status_code=response.status_code,
            request_id=meta.request_id,
        )
        return data


def _error_from_response(response: httpx.Response) -> UnkeyAPIError:
    """Build an error from a problem-details style error envelope."""
    title = response.reason_phrase or "Request failed"
    detail = ""
    request_id = None
    error_type = None

    try:
        payload = response.json()
    except ValueError:
        detail = response.text
    else:
        if isinstance(payload, dict):
            error = payload.get("error") or {}
            meta = payload.get("meta") or {}
            title = error.get("title") or title
            detail = error.get("detail") or ""
            error_type = error.get("type")
            request_id = meta.get("requestId")

    error_class = UnkeyNotFoundError if response.status_code == 404 else UnkeyAPIError
    return error_class(
        status_code=response.status_code,
        title=title,
        detail=detail,
        request_id=request_id,
        error_type=error_type,
    )


class _Service:
    def __init__(self, client: UnkeyClient):
        self._client = client


class ApisService(_Service):
    def create_api(self, body: c.CreateApiRequest) -> c.CreateApiResponseData:
        return self._client.call("apis.createApi", body, c.CreateApiResponseData)

    def get_api(self, body: c.GetApiRequest) -> c.ApiResponseData:
        return self._client.call("apis.getApi", body, c.ApiResponseData)

    def delete_api(self, body: c.DeleteApiRequest) -> c.EmptyData:
        return self._client.call("apis.deleteApi", body, c.EmptyData)


class KeysService(_Service):
    def create_key(self, body: c.CreateKeyRequest) -> c.CreateKeyResponseData:
        return self._client.call("keys.createKey", body, c.CreateKeyResponseData)

    def get_key(self, body: c.GetKeyRequest) -> c.KeyResponseData:
        return self._client.call("keys.getKey", body, c.KeyResponseData)

    def update_key(self, body: c.UpdateKeyRequest) -> c.EmptyData:
        return self._client.call("keys.updateKey", body, c.EmptyData)

    def delete_key(self, body: c.DeleteKeyRequest) -> c.EmptyData:
        return self._client.call("keys.deleteKey", body, c.EmptyData)


class PermissionsService(_Service):
    def create_permission(
        self, body: c.CreatePermissionRequest
    ) -> c.CreatePermissionResponseData:
        return self._client.call(
            "permissions.createPermission", body, c.CreatePermissionResponseData
        )

    def get_permission(self, body: c.GetPermissionRequest) -> c.PermissionResponseData:
        return self._client.call(
            "permissions.getPermission", body, c.PermissionResponseData
        )

    def delete_permission(self, body: c.DeletePermissionRequest) -> c.EmptyData:
        return self._client.call("permissions.deletePermission", body, c.EmptyData)

    def create_role(self, body: c.CreateRoleRequest) -> c.CreateRoleResponseData:
        return self._client.call("permissions.createRole", body, c.CreateRoleResponseData)

    def get_role(self, body: c.GetRoleRequest) -> c.RoleResponseData:
        return self._client.call("permissions.getRole", body, c.RoleResponseData)

    def delete_role(self, body: c.DeleteRoleRequest) -> c.EmptyData:
        return self._client.call("permissions.deleteRole", body, c.EmptyData)


class IdentitiesService(_Service):
    def create_identity(
        self, body: c.CreateIdentityRequest
    ) -> c.CreateIdentityResponseData:
        return self._client.call(
            "identities.createIdentity", body, c.CreateIdentityResponseData
        )

    def get_identity(self, body: c.GetIdentityRequest) -> c.IdentityResponseData:
        return self._client.call("identities.getIdentity", body, c.IdentityResponseData)

    def update_identity(self, body: c.UpdateIdentityRequest) -> c.EmptyData:
        return self._client.call("identities.updateIdentity", body, c.EmptyData)

    def delete_identity(self, body: c.DeleteIdentityRequest) -> c.EmptyData:
        return self._client.call("identities.deleteIdentity", body, c.EmptyData)
