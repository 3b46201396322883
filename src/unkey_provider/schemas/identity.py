"""Schema for the ``unkey_identity`` resource."""

from unkey_provider.framework.plan_modifiers import RequiresReplace
from unkey_provider.framework.schema import Schema, StringAttribute
from unkey_provider.framework.validators import LengthBetween, RegexMatches
from unkey_provider.schemas.common import (
    IDENTIFIER_MESSAGE,
    IDENTIFIER_PATTERN,
    id_attribute,
    ratelimits_attribute,
)


def identity_schema() -> Schema:
    return Schema(
        description="Manages an identity that groups keys of one user or organization.",
        attributes={
            "id": id_attribute("Identifier of the identity."),
            "external_id": StringAttribute(
                description=(
                    "Your system's stable identifier for the user or "
                    "organization. Changing it replaces the identity."
                ),
                required=True,
                validators=(
                    LengthBetween(3, 255),
                    RegexMatches(IDENTIFIER_PATTERN, IDENTIFIER_MESSAGE),
                ),
                plan_modifiers=(RequiresReplace(),),
            ),
            "meta": StringAttribute(
                description=(
                    "JSON object returned on verification of any key linked "
                    "to this identity. Do not store secrets here."
                ),
                optional=True,
            ),
            "ratelimits": ratelimits_attribute(
                "Rate limits shared by every key linked to this identity."
            ),
        },
    )
