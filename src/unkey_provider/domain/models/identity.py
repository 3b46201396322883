"""State model for the ``unkey_identity`` resource."""

from __future__ import annotations

from dataclasses import dataclass

from unkey_provider.domain.value_objects import RatelimitModel
from unkey_provider.framework.values import UNKNOWN, UnknownValue


@dataclass
class IdentityResourceModel:
    """An identity groups keys belonging to one user or organization.

    ``meta`` holds a JSON object serialized as a string. Rate limits declared
    here are shared by every key linked to the identity.
    """

    external_id: str
    id: str | UnknownValue = UNKNOWN
    meta: str | None | UnknownValue = None
    ratelimits: list[RatelimitModel] | None | UnknownValue = None
