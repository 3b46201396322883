"""Value objects for nested resource attributes.

These mirror the nested object shapes in Terraform state (credits, refill,
rate limit entries). Optional sub-attributes use ``None`` for null.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RefillInterval(StrEnum):
    """How often a key's credits are replenished."""

    DAILY = "daily"
    MONTHLY = "monthly"


@dataclass
class RefillModel:
    """Scheduled credit replenishment.

    ``refill_day`` only has meaning for monthly refills. Days beyond the
    length of a month refill on its last day.
    """

    interval: str
    amount: int
    refill_day: int | None = None


@dataclass
class CreditsModel:
    """Usage credits attached to a key, optionally refilled on a schedule."""

    remaining: int | None
    refill: RefillModel | None = None


@dataclass
class RatelimitModel:
    """A named rate limit window.

    Names must be unique per key or identity so verification can select them.
    """

    name: str
    limit: int
    duration: int
    auto_apply: bool = False
