"""Conversions for the ``ratelimits`` list attribute.

Element order is preserved in both directions.
"""

from __future__ import annotations

from collections.abc import Sequence

from unkey_provider.domain.value_objects import RatelimitModel
from unkey_provider.framework.values import UnknownValue, is_null_or_unknown
from unkey_provider.infrastructure.unkey.components import (
    RatelimitRequest,
    RatelimitResponse,
)


def ratelimits_to_api(
    ratelimits: Sequence[RatelimitModel] | None | UnknownValue,
) -> list[RatelimitRequest] | None:
    if is_null_or_unknown(ratelimits):
        return None

    return [
        RatelimitRequest(
            name=rl.name,
            limit=rl.limit,
            duration=rl.duration,
            auto_apply=bool(rl.auto_apply),
        )
        for rl in ratelimits  # type: ignore[union-attr]
    ]


def ratelimits_from_api(
    ratelimits: Sequence[RatelimitResponse] | None,
) -> list[RatelimitModel] | None:
    """API rate limits to state; an empty list becomes null."""
    if not ratelimits:
        return None

    return [
        RatelimitModel(
            name=rl.name,
            limit=rl.limit,
            duration=rl.duration,
            auto_apply=rl.auto_apply,
        )
        for rl in ratelimits
    ]
