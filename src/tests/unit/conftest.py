"""Unit test fixtures: an in-memory Unkey API behind httpx.MockTransport."""

from __future__ import annotations

import itertools
import json
from typing import Any
from unittest.mock import create_autospec

import httpx
import pytest

from unkey_provider.infrastructure.unkey import UnkeyClient
from unkey_provider.infrastructure.unkey.observability import UnkeyClientProbe
from unkey_provider.resources.observability import ResourceProbe

TEST_BASE_URL = "https://api.unkey.test"
TEST_ROOT_KEY = "unkey_root_test"


class FakeUnkeyApi:
    """Minimal stateful stand-in for the Unkey v2 API.

    Every request is recorded as ``(operation, body)``. Entities live in
    plain dicts keyed by identifier, stored in their wire (camelCase) shape.
    """

    def __init__(self) -> None:
        self.requests: list[tuple[str, dict[str, Any]]] = []
        self.apis: dict[str, dict[str, Any]] = {}
        self.keys: dict[str, dict[str, Any]] = {}
        self.permissions: dict[str, dict[str, Any]] = {}
        self.roles: dict[str, dict[str, Any]] = {}
        self.identities: dict[str, dict[str, Any]] = {}
        self.deleted_keys: dict[str, bool] = {}
        self._failures: dict[str, httpx.Response] = {}
        self._ids = itertools.count(1)

    # Test helpers

    def fail(
        self,
        operation: str,
        status_code: int = 500,
        title: str = "Internal Server Error",
        detail: str = "something went wrong",
    ) -> None:
        """Make every following call to ``operation`` fail."""
        self._failures[operation] = self._error(status_code, title, detail)

    def bodies(self, operation: str) -> list[dict[str, Any]]:
        return [body for op, body in self.requests if op == operation]

    def operations(self) -> list[str]:
        return [op for op, _ in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        operation = request.url.path.removeprefix("/v2/")
        body = json.loads(request.content or b"{}")
        self.requests.append((operation, body))

        if operation in self._failures:
            return self._failures[operation]

        namespace, _, name = operation.partition(".")
        return getattr(self, f"_{namespace}_{name}")(body)

    # Envelopes

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}_{next(self._ids)}"

    def _ok(self, data: dict[str, Any]) -> httpx.Response:
        return httpx.Response(
            200, json={"meta": {"requestId": self._next_id("req")}, "data": data}
        )

    def _error(self, status_code: int, title: str, detail: str) -> httpx.Response:
        return httpx.Response(
            status_code,
            json={
                "meta": {"requestId": self._next_id("req")},
                "error": {
                    "title": title,
                    "detail": detail,
                    "status": status_code,
                    "type": "https://unkey.com/docs/errors",
                },
            },
        )

    def _not_found(self, kind: str, identifier: str) -> httpx.Response:
        return self._error(404, "Not Found", f"The requested {kind} {identifier} does not exist.")

    # apis

    def _apis_createApi(self, body: dict[str, Any]) -> httpx.Response:
        api_id = self._next_id("api")
        self.apis[api_id] = {"id": api_id, "name": body["name"]}
        return self._ok({"apiId": api_id})

    def _apis_getApi(self, body: dict[str, Any]) -> httpx.Response:
        api = self.apis.get(body["apiId"])
        if api is None:
            return self._not_found("API", body["apiId"])
        return self._ok(api)

    def _apis_deleteApi(self, body: dict[str, Any]) -> httpx.Response:
        if self.apis.pop(body["apiId"], None) is None:
            return self._not_found("API", body["apiId"])
        return self._ok({})

    # keys

    def _keys_createKey(self, body: dict[str, Any]) -> httpx.Response:
        key_id = self._next_id("key")
        prefix = body.get("prefix")
        secret = f"{prefix}_" if prefix else ""
        secret += "x" * (body.get("byteLength") or 16)
        record: dict[str, Any] = {
            "keyId": key_id,
            "start": secret[:6],
            "enabled": body.get("enabled", True),
            "name": body.get("name"),
            "meta": body.get("meta"),
            "expires": body.get("expires"),
            "credits": body.get("credits"),
            "roles": body.get("roles", []),
            "permissions": body.get("permissions", []),
            "ratelimits": [
                {"id": self._next_id("rl"), **rl} for rl in body.get("ratelimits", [])
            ],
        }
        if body.get("externalId"):
            record["identity"] = {"externalId": body["externalId"]}
        self.keys[key_id] = record
        return self._ok({"keyId": key_id, "key": secret})

    def _keys_getKey(self, body: dict[str, Any]) -> httpx.Response:
        key = self.keys.get(body["keyId"])
        if key is None:
            return self._not_found("key", body["keyId"])
        return self._ok(key)

    def _keys_updateKey(self, body: dict[str, Any]) -> httpx.Response:
        key = self.keys.get(body["keyId"])
        if key is None:
            return self._not_found("key", body["keyId"])

        for field, value in body.items():
            if field == "keyId":
                continue
            if field == "externalId":
                key["identity"] = {"externalId": value} if value else None
            elif field == "ratelimits":
                key["ratelimits"] = [{"id": self._next_id("rl"), **rl} for rl in value]
            elif field in ("roles", "permissions"):
                key[field] = value or []
            else:
                key[field] = value
        return self._ok({})

    def _keys_deleteKey(self, body: dict[str, Any]) -> httpx.Response:
        if self.keys.pop(body["keyId"], None) is None:
            return self._not_found("key", body["keyId"])
        self.deleted_keys[body["keyId"]] = body.get("permanent", False)
        return self._ok({})

    # permissions and roles

    def _permissions_createPermission(self, body: dict[str, Any]) -> httpx.Response:
        permission_id = self._next_id("perm")
        self.permissions[permission_id] = {"id": permission_id, **body}
        return self._ok({"permissionId": permission_id})

    def _permissions_getPermission(self, body: dict[str, Any]) -> httpx.Response:
        permission = self.permissions.get(body["permission"])
        if permission is None:
            return self._not_found("permission", body["permission"])
        return self._ok(permission)

    def _permissions_deletePermission(self, body: dict[str, Any]) -> httpx.Response:
        if self.permissions.pop(body["permission"], None) is None:
            return self._not_found("permission", body["permission"])
        return self._ok({})

    def _permissions_createRole(self, body: dict[str, Any]) -> httpx.Response:
        role_id = self._next_id("role")
        self.roles[role_id] = {"id": role_id, **body}
        return self._ok({"roleId": role_id})

    def _permissions_getRole(self, body: dict[str, Any]) -> httpx.Response:
        role = self.roles.get(body["role"])
        if role is None:
            return self._not_found("role", body["role"])
        return self._ok(role)

    def _permissions_deleteRole(self, body: dict[str, Any]) -> httpx.Response:
        if self.roles.pop(body["role"], None) is None:
            return self._not_found("role", body["role"])
        return self._ok({})

    # identities

    def _identities_createIdentity(self, body: dict[str, Any]) -> httpx.Response:
        identity_id = self._next_id("id")
        self.identities[identity_id] = {
            "id": identity_id,
            "externalId": body["externalId"],
            "meta": body.get("meta"),
            "ratelimits": [
                {"id": self._next_id("rl"), **rl} for rl in body.get("ratelimits", [])
            ],
        }
        return self._ok({"identityId": identity_id})

    def _identities_getIdentity(self, body: dict[str, Any]) -> httpx.Response:
        identity = self.identities.get(body["identity"])
        if identity is None:
            return self._not_found("identity", body["identity"])
        return self._ok(identity)

    def _identities_updateIdentity(self, body: dict[str, Any]) -> httpx.Response:
        identity = self.identities.get(body["identity"])
        if identity is None:
            return self._not_found("identity", body["identity"])
        if "meta" in body:
            identity["meta"] = body["meta"]
        if "ratelimits" in body:
            identity["ratelimits"] = [
                {"id": self._next_id("rl"), **rl} for rl in body["ratelimits"] or []
            ]
        return self._ok({})

    def _identities_deleteIdentity(self, body: dict[str, Any]) -> httpx.Response:
        if self.identities.pop(body["identity"], None) is None:
            return self._not_found("identity", body["identity"])
        return self._ok({})


@pytest.fixture
def fake_api() -> FakeUnkeyApi:
    """Provide an empty in-memory Unkey API."""
    return FakeUnkeyApi()


@pytest.fixture
def mock_client_probe():
    """Provide a mock UnkeyClientProbe."""
    return create_autospec(UnkeyClientProbe, instance=True)


@pytest.fixture
def mock_resource_probe():
    """Provide a mock ResourceProbe."""
    return create_autospec(ResourceProbe, instance=True)


@pytest.fixture
def unkey_client(fake_api, mock_client_probe):
    """Provide an UnkeyClient wired to the fake API."""
    http_client = httpx.Client(transport=httpx.MockTransport(fake_api.handler))
    client = UnkeyClient(
        root_key=TEST_ROOT_KEY,
        base_url=TEST_BASE_URL,
        probe=mock_client_probe,
        http_client=http_client,
    )
    yield client
    http_client.close()
