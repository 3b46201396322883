"""Schema for the ``unkey_key`` resource."""

from unkey_provider.domain.value_objects import RefillInterval
from unkey_provider.framework.plan_modifiers import RequiresReplace, UseStateForUnknown
from unkey_provider.framework.schema import (
    BoolAttribute,
    Int64Attribute,
    ListAttribute,
    Schema,
    SingleNestedAttribute,
    StringAttribute,
)
from unkey_provider.framework.validators import (
    AtLeast,
    Between,
    LengthBetween,
    OneOf,
    OnlyWhenEquals,
    SizeAtMost,
    ValueStringsAre,
)
from unkey_provider.schemas.common import id_attribute, ratelimits_attribute

# 2100-01-01T00:00:00Z in milliseconds
MAX_EXPIRES_MS = 4_102_444_800_000
MAX_ROLES = 100
MAX_PERMISSIONS = 1000


def key_schema() -> Schema:
    return Schema(
        description=(
            "Creates a key in an API namespace. The plaintext key is returned "
            "once at creation and cannot be retrieved later."
        ),
        attributes={
            "id": id_attribute(
                "Identifier of the key used for management operations. "
                "This is not the secret and is safe to log."
            ),
            "key": StringAttribute(
                description=(
                    "The generated key. Only available right after creation; "
                    "hand it to the end user over a secure channel."
                ),
                computed=True,
                sensitive=True,
                plan_modifiers=(UseStateForUnknown(),),
            ),
            "api_id": StringAttribute(
                description="The API namespace this key belongs to.",
                required=True,
                validators=(LengthBetween(3, 255),),
                plan_modifiers=(RequiresReplace(),),
            ),
            "prefix": StringAttribute(
                description="Visible prefix of the generated key, e.g. 'prod'.",
                optional=True,
                validators=(LengthBetween(1, 16),),
                plan_modifiers=(RequiresReplace(),),
            ),
            "name": StringAttribute(
                description="Human-readable name shown in dashboards.",
                optional=True,
                validators=(LengthBetween(1, 255),),
            ),
            "byte_length": Int64Attribute(
                description="Strength of the generated key in bytes.",
                required=True,
                validators=(Between(16, 255),),
                plan_modifiers=(RequiresReplace(),),
            ),
            "external_id": StringAttribute(
                description="Links the key to an identity by your own identifier.",
                optional=True,
                validators=(LengthBetween(1, 255),),
            ),
            "meta": StringAttribute(
                description="JSON object returned when the key is verified.",
                optional=True,
            ),
            "roles": ListAttribute(
                description="Names of roles assigned to the key.",
                optional=True,
                validators=(
                    SizeAtMost(MAX_ROLES),
                    ValueStringsAre((LengthBetween(1, 100),)),
                ),
            ),
            "permissions": ListAttribute(
                description="Permission slugs granted directly to the key.",
                optional=True,
                validators=(
                    SizeAtMost(MAX_PERMISSIONS),
                    ValueStringsAre((LengthBetween(1, 100),)),
                ),
            ),
            "expires": Int64Attribute(
                description="Expiry as a Unix timestamp in milliseconds.",
                optional=True,
                validators=(Between(0, MAX_EXPIRES_MS),),
            ),
            "credits": SingleNestedAttribute(
                description=(
                    "Usage credits consumed on verification, with optional "
                    "automatic refills. Omit for unlimited usage."
                ),
                optional=True,
                attributes={
                    "remaining": Int64Attribute(
                        description="Number of credits remaining.",
                        required=True,
                        validators=(AtLeast(0),),
                    ),
                    "refill": SingleNestedAttribute(
                        description="Automatic credit refill schedule.",
                        optional=True,
                        validators=(
                            OnlyWhenEquals(
                                "refill_day", "interval", RefillInterval.MONTHLY.value
                            ),
                        ),
                        attributes={
                            "interval": StringAttribute(
                                description="How often credits are refilled.",
                                required=True,
                                validators=(
                                    OneOf(tuple(i.value for i in RefillInterval)),
                                ),
                            ),
                            "amount": Int64Attribute(
                                description="Credits added on each refill.",
                                required=True,
                                validators=(AtLeast(1),),
                            ),
                            "refill_day": Int64Attribute(
                                description=(
                                    "Day of month for monthly refills. Days past "
                                    "the end of a month refill on its last day."
                                ),
                                optional=True,
                                validators=(Between(1, 31),),
                            ),
                        },
                    ),
                },
            ),
            "ratelimits": ratelimits_attribute(
                "Time-window rate limits applied to the key."
            ),
            "enabled": BoolAttribute(
                description="Whether the key can be used for verification.",
                optional=True,
            ),
            "recoverable": BoolAttribute(
                description=(
                    "Store the plaintext key encrypted so it can be recovered. "
                    "Only for development keys."
                ),
                optional=True,
                plan_modifiers=(RequiresReplace(),),
            ),
            "permanent_deletion": BoolAttribute(
                description=(
                    "Erase the key irreversibly on destroy instead of the "
                    "default soft deletion."
                ),
                optional=True,
            ),
            "last_updated": StringAttribute(
                description="Time of the last create or update by Terraform.",
                computed=True,
            ),
        },
    )
