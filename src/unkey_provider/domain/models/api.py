"""State model for the ``unkey_api`` resource."""

from __future__ import annotations

from dataclasses import dataclass

from unkey_provider.framework.values import UNKNOWN, UnknownValue


@dataclass
class ApiResourceModel:
    name: str
    id: str | UnknownValue = UNKNOWN
