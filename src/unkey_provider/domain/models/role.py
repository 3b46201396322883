"""State model for the ``unkey_role`` resource."""

from __future__ import annotations

from dataclasses import dataclass

from unkey_provider.framework.values import UNKNOWN, UnknownValue


@dataclass
class RoleResourceModel:
    name: str
    description: str | None = None
    id: str | UnknownValue = UNKNOWN
