"""State model for the ``unkey_permission`` resource."""

from __future__ import annotations

from dataclasses import dataclass

from unkey_provider.framework.values import UNKNOWN, UnknownValue


@dataclass
class PermissionResourceModel:
    name: str
    slug: str
    description: str | None = None
    id: str | UnknownValue = UNKNOWN
