"""Unit tests for declarative schemas and the resource schemas built on them."""

import dataclasses

import pytest

from unkey_provider.domain.models import (
    ApiResourceModel,
    IdentityResourceModel,
    KeyResourceModel,
    PermissionResourceModel,
    RoleResourceModel,
)
from unkey_provider.domain.value_objects import CreditsModel, RatelimitModel, RefillModel
from unkey_provider.framework.plan_modifiers import RequiresReplace, UseStateForUnknown
from unkey_provider.framework.schema import SingleNestedAttribute
from unkey_provider.framework.values import UNKNOWN
from unkey_provider.schemas import (
    api_schema,
    identity_schema,
    key_schema,
    permission_schema,
    role_schema,
)
from unkey_provider.schemas.key import MAX_EXPIRES_MS, MAX_PERMISSIONS, MAX_ROLES


def _attribute_paths(diagnostics):
    return [d.attribute for d in diagnostics]


class TestSchemaValidate:
    """Tests for Schema.validate."""

    def test_valid_key_has_no_diagnostics(self):
        """A fully populated, valid key plan should validate cleanly."""
        plan = KeyResourceModel(
            api_id="api_123",
            byte_length=32,
            prefix="prod",
            roles=["admin"],
            permissions=["read.documents"],
            credits=CreditsModel(
                remaining=100,
                refill=RefillModel(interval="monthly", amount=100, refill_day=15),
            ),
            ratelimits=[
                RatelimitModel(name="requests", limit=100, duration=60000, auto_apply=True)
            ],
            enabled=True,
        )

        assert not key_schema().validate(plan)

    def test_missing_required_attribute(self):
        """A null required attribute should produce a missing-argument error."""
        plan = KeyResourceModel(api_id=None, byte_length=32)

        (diagnostic,) = key_schema().validate(plan)

        assert diagnostic.summary == "Missing required argument"
        assert diagnostic.attribute == "api_id"

    def test_validator_failure_mentions_path(self):
        """Validator errors should name the attribute path."""
        plan = KeyResourceModel(api_id="api_123", byte_length=8)

        (diagnostic,) = key_schema().validate(plan)

        assert diagnostic.summary == "Invalid Attribute Value"
        assert diagnostic.detail == (
            "Attribute byte_length value must be between 16 and 255, got: 8"
        )

    def test_nested_object_paths(self):
        """Errors inside nested objects should use dotted paths."""
        plan = KeyResourceModel(
            api_id="api_123",
            byte_length=16,
            credits=CreditsModel(
                remaining=-1, refill=RefillModel(interval="weekly", amount=0)
            ),
        )

        paths = _attribute_paths(key_schema().validate(plan))

        assert paths == [
            "credits.remaining",
            "credits.refill.interval",
            "credits.refill.amount",
        ]

    def test_nested_list_paths(self):
        """Errors inside list elements should include the element index."""
        plan = IdentityResourceModel(
            external_id="user_123",
            ratelimits=[
                RatelimitModel(name="ok-name", limit=1, duration=1000),
                RatelimitModel(name="x", limit=1, duration=10),
            ],
        )

        paths = _attribute_paths(identity_schema().validate(plan))

        assert paths == ["ratelimits[1].name", "ratelimits[1].duration"]

    def test_unknown_values_are_skipped(self):
        """Unknown values cannot be judged yet and must not be reported."""
        plan = KeyResourceModel(api_id="api_123", byte_length=32, name=UNKNOWN)

        assert not key_schema().validate(plan)

    def test_too_many_ratelimits(self):
        """More than fifty rate limits should be rejected."""
        plan = KeyResourceModel(
            api_id="api_123",
            byte_length=32,
            ratelimits=[
                RatelimitModel(name=f"limit-{i}", limit=1, duration=1000)
                for i in range(51)
            ],
        )

        (diagnostic,) = key_schema().validate(plan)

        assert diagnostic.attribute == "ratelimits"

    @pytest.mark.parametrize(
        ("field", "at_limit", "over_limit"),
        [
            ("roles", ["admin"] * MAX_ROLES, ["admin"] * (MAX_ROLES + 1)),
            (
                "permissions",
                ["read"] * MAX_PERMISSIONS,
                ["read"] * (MAX_PERMISSIONS + 1),
            ),
            ("expires", MAX_EXPIRES_MS, MAX_EXPIRES_MS + 1),
        ],
    )
    def test_key_limits(self, field, at_limit, over_limit):
        """Roles, permissions and expiry accept their limit and reject one past it."""
        schema = key_schema()
        base = KeyResourceModel(api_id="api_123", byte_length=32)

        assert not schema.validate(dataclasses.replace(base, **{field: at_limit}))
        (diagnostic,) = schema.validate(dataclasses.replace(base, **{field: over_limit}))
        assert diagnostic.attribute == field

    def test_refill_day_only_for_monthly_refills(self):
        """A refill day on a daily refill is rejected on the refill object."""
        plan = KeyResourceModel(
            api_id="api_123",
            byte_length=32,
            credits=CreditsModel(
                remaining=10,
                refill=RefillModel(interval="daily", amount=10, refill_day=5),
            ),
        )

        (diagnostic,) = key_schema().validate(plan)

        assert diagnostic.attribute == "credits.refill"
        assert "refill_day can only be set" in diagnostic.detail

    @pytest.mark.parametrize("name", ["1api", "my api", "ab"])
    def test_api_name_rules(self, name):
        """API names must start with a letter and be at least three characters."""
        diagnostics = api_schema().validate(ApiResourceModel(name=name))
        assert diagnostics.has_error()

    def test_permission_slug_pattern(self):
        """Permission slugs allow letters, digits, dots, underscores and hyphens."""
        schema = permission_schema()

        assert not schema.validate(
            PermissionResourceModel(name="Read documents", slug="read.documents")
        )
        assert schema.validate(
            PermissionResourceModel(name="Read documents", slug="read documents")
        ).has_error()

    def test_role_description_limit(self):
        """Role descriptions are capped at 2048 characters."""
        plan = RoleResourceModel(name="admin", description="x" * 2049)
        assert role_schema().validate(plan).has_error()


class TestPlanModifiers:
    """Tests for requires_replace and apply_plan_modifiers."""

    def test_requires_replace_lists_changed_attributes(self):
        """Only changed attributes with RequiresReplace are reported."""
        state = PermissionResourceModel(
            name="Read", slug="read", description=None, id="perm_1"
        )
        plan = PermissionResourceModel(
            name="Read", slug="read.all", description="All reads", id=UNKNOWN
        )

        assert permission_schema().requires_replace(plan, state) == [
            "slug",
            "description",
        ]

    def test_requires_replace_ignores_in_place_attributes(self):
        """Key attributes updatable in place never force replacement."""
        state = KeyResourceModel(api_id="api_1", byte_length=32, id="key_1", name="a")
        plan = KeyResourceModel(api_id="api_1", byte_length=32, id="key_1", name="b")

        assert key_schema().requires_replace(plan, state) == []

    def test_requires_replace_for_key_namespace(self):
        """Moving a key to another API replaces it."""
        state = KeyResourceModel(api_id="api_1", byte_length=32, id="key_1")
        plan = KeyResourceModel(api_id="api_2", byte_length=32, id="key_1")

        assert key_schema().requires_replace(plan, state) == ["api_id"]

    def test_identity_external_id_requires_replace(self):
        """A new external ID replaces the identity."""
        state = IdentityResourceModel(external_id="user_1", id="id_1")
        plan = IdentityResourceModel(external_id="user_2")

        assert identity_schema().requires_replace(plan, state) == ["external_id"]

    def test_use_state_for_unknown_carries_id_and_key(self):
        """Computed id and key should be carried from state instead of unknown."""
        state = KeyResourceModel(
            api_id="api_1", byte_length=32, id="key_1", key="secret", name="old"
        )
        plan = KeyResourceModel(api_id="api_1", byte_length=32, name="new")

        planned = key_schema().apply_plan_modifiers(plan, state)

        assert planned.id == "key_1"
        assert planned.key == "secret"
        assert planned.name == "new"
        assert planned.last_updated is UNKNOWN

    def test_apply_plan_modifiers_without_state(self):
        """On create there is no state and the plan is returned as-is."""
        plan = ApiResourceModel(name="payments")

        assert api_schema().apply_plan_modifiers(plan, None) is plan


class TestResourceSchemaShapes:
    """Spot checks on attribute flags of the resource schemas."""

    def test_key_secret_is_sensitive_and_computed(self):
        """The plaintext key must be sensitive and computed."""
        key = key_schema().attributes["key"]
        assert key.sensitive
        assert key.computed
        assert key.has_modifier(UseStateForUnknown)

    def test_api_name_requires_replace(self):
        """APIs have no update endpoint, so renaming replaces them."""
        assert api_schema().attributes["name"].has_modifier(RequiresReplace)

    def test_refill_is_nested_in_credits(self):
        """Refill lives inside credits as an optional nested object."""
        credits = key_schema().attributes["credits"]
        assert isinstance(credits, SingleNestedAttribute)
        assert credits.attributes["refill"].optional
        assert credits.attributes["remaining"].required
