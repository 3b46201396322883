"""Schema for the ``unkey_permission`` resource."""

from unkey_provider.framework.plan_modifiers import RequiresReplace
from unkey_provider.framework.schema import Schema, StringAttribute
from unkey_provider.framework.validators import (
    LengthAtMost,
    LengthBetween,
    RegexMatches,
)
from unkey_provider.schemas.common import (
    IDENTIFIER_MESSAGE,
    IDENTIFIER_PATTERN,
    id_attribute,
)


def permission_schema() -> Schema:
    return Schema(
        description="Manages a permission that can be granted to keys and roles.",
        attributes={
            "id": id_attribute("Identifier of the permission."),
            "name": StringAttribute(
                description=(
                    "Human-readable name, unique within the workspace, "
                    "e.g. 'users.read'."
                ),
                required=True,
                validators=(LengthBetween(1, 512),),
                plan_modifiers=(RequiresReplace(),),
            ),
            "slug": StringAttribute(
                description=(
                    "URL-safe identifier used when granting the permission, "
                    "unique within the workspace."
                ),
                required=True,
                validators=(
                    RegexMatches(IDENTIFIER_PATTERN, IDENTIFIER_MESSAGE),
                    LengthBetween(1, 128),
                ),
                plan_modifiers=(RequiresReplace(),),
            ),
            "description": StringAttribute(
                description="What the permission grants access to.",
                optional=True,
                validators=(LengthAtMost(128),),
                plan_modifiers=(RequiresReplace(),),
            ),
        },
    )
