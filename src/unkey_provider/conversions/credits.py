"""Conversions for the ``credits`` attribute and its optional ``refill``."""

from __future__ import annotations

from typing import Any

from unkey_provider.domain.value_objects import CreditsModel, RefillModel
from unkey_provider.framework.values import UnknownValue, is_null_or_unknown
from unkey_provider.infrastructure.unkey.components import (
    KeyCreditsData,
    KeyCreditsRefill,
    UpdateKeyCreditsData,
    UpdateKeyCreditsRefill,
)


def credits_to_api(credits: CreditsModel | None | UnknownValue) -> KeyCreditsData | None:
    """Plan credits to a create request body. No refill is synthesized."""
    if is_null_or_unknown(credits):
        return None
    assert isinstance(credits, CreditsModel)

    refill = None
    if not is_null_or_unknown(credits.refill):
        refill = KeyCreditsRefill(
            interval=credits.refill.interval,
            amount=credits.refill.amount,
            refill_day=credits.refill.refill_day,
        )

    return KeyCreditsData(remaining=credits.remaining, refill=refill)


def credits_to_update_api(
    credits: CreditsModel | None | UnknownValue,
) -> UpdateKeyCreditsData | None:
    """Plan credits to a partial update body.

    A missing refill is sent as an explicit null so that a previously
    configured refill is removed. A missing refill day is left out.
    """
    if is_null_or_unknown(credits):
        return None
    assert isinstance(credits, CreditsModel)

    refill = None
    if not is_null_or_unknown(credits.refill):
        fields: dict[str, Any] = {
            "interval": credits.refill.interval,
            "amount": credits.refill.amount,
        }
        if credits.refill.refill_day is not None:
            fields["refill_day"] = credits.refill.refill_day
        refill = UpdateKeyCreditsRefill(**fields)

    return UpdateKeyCreditsData(remaining=credits.remaining, refill=refill)


def credits_from_api(credits: KeyCreditsData | None) -> CreditsModel | None:
    """API credits to state; an absent refill stays null."""
    if credits is None:
        return None

    refill = None
    if credits.refill is not None:
        refill = RefillModel(
            interval=str(credits.refill.interval),
            amount=credits.refill.amount,
            refill_day=credits.refill.refill_day,
        )

    return CreditsModel(remaining=credits.remaining, refill=refill)
