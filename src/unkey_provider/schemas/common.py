"""Attribute definitions shared between resource schemas."""

from unkey_provider.framework.plan_modifiers import UseStateForUnknown
from unkey_provider.framework.schema import (
    BoolAttribute,
    Int64Attribute,
    ListNestedAttribute,
    StringAttribute,
)
from unkey_provider.framework.validators import AtLeast, LengthBetween, SizeAtMost

IDENTIFIER_PATTERN = r"[a-zA-Z][a-zA-Z0-9._-]*"
IDENTIFIER_MESSAGE = (
    "must start with a letter and contain only letters, numbers, "
    "periods, underscores and hyphens"
)

MAX_RATELIMITS = 50


def id_attribute(description: str) -> StringAttribute:
    """Server-assigned identifier, kept stable across plans."""
    return StringAttribute(
        description=description,
        computed=True,
        plan_modifiers=(UseStateForUnknown(),),
    )


def ratelimits_attribute(description: str) -> ListNestedAttribute:
    return ListNestedAttribute(
        description=description,
        optional=True,
        validators=(SizeAtMost(MAX_RATELIMITS),),
        attributes={
            "name": StringAttribute(
                description=(
                    "Name used to select this limit during verification. "
                    "Must be unique per key or identity."
                ),
                required=True,
                validators=(LengthBetween(3, 128),),
            ),
            "limit": Int64Attribute(
                description="Maximum number of operations allowed per window.",
                required=True,
                validators=(AtLeast(1),),
            ),
            "duration": Int64Attribute(
                description="Window length in milliseconds.",
                required=True,
                validators=(AtLeast(1000),),
            ),
            "auto_apply": BoolAttribute(
                description="Apply this limit automatically when verifying a key.",
                required=True,
            ),
        },
    )
