"""Plan modifiers understood by ``Schema``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequiresReplace:
    """A change to the attribute forces destroy and re-create."""


@dataclass(frozen=True)
class UseStateForUnknown:
    """Carry the prior state value forward instead of planning it as unknown."""
