"""Schema for the ``unkey_api`` resource."""

from unkey_provider.framework.plan_modifiers import RequiresReplace
from unkey_provider.framework.schema import Schema, StringAttribute
from unkey_provider.framework.validators import LengthBetween, RegexMatches
from unkey_provider.schemas.common import (
    IDENTIFIER_MESSAGE,
    IDENTIFIER_PATTERN,
    id_attribute,
)


def api_schema() -> Schema:
    return Schema(
        description="Manages an API namespace that keys are issued in.",
        attributes={
            "id": id_attribute(
                "Identifier of the API, prefixed with 'api_'. "
                "Required when creating keys in this namespace."
            ),
            "name": StringAttribute(
                description=(
                    "Name of the API namespace, e.g. 'payment-service-prod'. "
                    "APIs cannot be renamed; changing it replaces the API."
                ),
                required=True,
                validators=(
                    LengthBetween(3, 255),
                    RegexMatches(IDENTIFIER_PATTERN, IDENTIFIER_MESSAGE),
                ),
                plan_modifiers=(RequiresReplace(),),
            ),
        },
    )
