"""Unit tests for Unkey request and response bodies."""

from unkey_provider.domain.value_objects import RefillInterval
from unkey_provider.infrastructure.unkey.components import (
    CreateKeyRequest,
    IdentityResponseData,
    KeyResponseData,
    UpdateIdentityRequest,
    UpdateKeyRequest,
)


class TestRequestBodies:
    """Tests for request serialization."""

    def test_create_body_is_camel_case_without_nulls(self):
        """Create bodies use wire names and drop null fields."""
        body = CreateKeyRequest(api_id="api_1", byte_length=16, external_id="user_1")

        assert body.to_payload() == {
            "apiId": "api_1",
            "byteLength": 16,
            "externalId": "user_1",
        }

    def test_partial_body_sends_only_set_fields(self):
        """Explicit nulls and empty lists are kept; unset fields are dropped."""
        body = UpdateKeyRequest(key_id="key_1", roles=[], meta=None)

        assert body.to_payload() == {"keyId": "key_1", "roles": [], "meta": None}

    def test_changed_fields_exclude_identifier(self):
        """The identifier is not a change."""
        body = UpdateKeyRequest(key_id="key_1", roles=[], name="ci")

        assert body.changed_fields == ["name", "roles"]
        assert body.has_changes

    def test_identifier_only_has_no_changes(self):
        """A body with only the identifier carries no change."""
        assert not UpdateKeyRequest(key_id="key_1").has_changes
        assert not UpdateIdentityRequest(identity="id_1").has_changes


class TestResponseBodies:
    """Tests for response parsing."""

    def test_key_response_defaults(self):
        """Missing lists default to empty and enabled defaults to true."""
        data = KeyResponseData.model_validate({"keyId": "key_1"})

        assert data.enabled is True
        assert data.roles == []
        assert data.permissions == []
        assert data.ratelimits == []
        assert data.identity is None

    def test_key_response_nested_shapes(self):
        """Nested credits, identity and rate limits are parsed."""
        data = KeyResponseData.model_validate(
            {
                "keyId": "key_1",
                "credits": {
                    "remaining": 5,
                    "refill": {"interval": "monthly", "amount": 10, "refillDay": 3},
                },
                "identity": {"id": "id_1", "externalId": "user_1"},
                "ratelimits": [
                    {"id": "rl_1", "name": "api", "limit": 1, "duration": 1000, "autoApply": True}
                ],
                "someNewField": "ignored",
            }
        )

        assert data.credits.refill.interval is RefillInterval.MONTHLY
        assert data.credits.refill.refill_day == 3
        assert data.identity.external_id == "user_1"
        assert data.ratelimits[0].auto_apply is True

    def test_identity_response(self):
        """Identity responses expose snake_case attributes."""
        data = IdentityResponseData.model_validate(
            {"id": "id_1", "externalId": "user_1", "meta": {"a": 1}}
        )

        assert data.external_id == "user_1"
        assert data.meta == {"a": 1}
        assert data.ratelimits == []
