"""Schema for the ``unkey_role`` resource."""

from unkey_provider.framework.plan_modifiers import RequiresReplace
from unkey_provider.framework.schema import Schema, StringAttribute
from unkey_provider.framework.validators import LengthAtMost, LengthBetween
from unkey_provider.schemas.common import id_attribute


def role_schema() -> Schema:
    return Schema(
        description="Manages a role grouping permissions for assignment to keys.",
        attributes={
            "id": id_attribute("Identifier of the role."),
            "name": StringAttribute(
                description=(
                    "Unique name of the role within the workspace, "
                    "e.g. 'admin' or 'billing_manager'."
                ),
                required=True,
                validators=(LengthBetween(1, 512),),
                plan_modifiers=(RequiresReplace(),),
            ),
            "description": StringAttribute(
                description="What the role is for and what access it grants.",
                optional=True,
                validators=(LengthAtMost(2048),),
                plan_modifiers=(RequiresReplace(),),
            ),
        },
    )
