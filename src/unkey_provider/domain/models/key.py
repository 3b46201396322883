"""State model for the ``unkey_key`` resource."""

from __future__ import annotations

from dataclasses import dataclass

from unkey_provider.domain.value_objects import CreditsModel, RatelimitModel
from unkey_provider.framework.values import UNKNOWN, UnknownValue


@dataclass
class KeyResourceModel:
    """A key issued within an API namespace.

    Attributes:
        api_id: The API the key belongs to.
        byte_length: Cryptographic strength of the generated key, 16 to 255.
        id: Server-assigned key identifier, safe to log.
        key: The plaintext key. Returned once at creation and never re-read.
        meta: JSON object serialized as a string.
        expires: Expiry as a Unix timestamp in milliseconds.
        permanent_deletion: Local-only flag selecting permanent over soft
            deletion when the resource is destroyed.
        last_updated: Time of the last create or update, RFC 850 style.
    """

    api_id: str
    byte_length: int
    id: str | UnknownValue = UNKNOWN
    key: str | None | UnknownValue = UNKNOWN
    prefix: str | None = None
    name: str | None | UnknownValue = None
    external_id: str | None | UnknownValue = None
    meta: str | None | UnknownValue = None
    roles: list[str] | None | UnknownValue = None
    permissions: list[str] | None | UnknownValue = None
    expires: int | None | UnknownValue = None
    credits: CreditsModel | None | UnknownValue = None
    ratelimits: list[RatelimitModel] | None | UnknownValue = None
    enabled: bool | None | UnknownValue = None
    recoverable: bool | None = None
    permanent_deletion: bool | None = None
    last_updated: str | UnknownValue = UNKNOWN
