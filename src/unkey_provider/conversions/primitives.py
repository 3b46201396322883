"""Conversions for flat attributes: string lists and JSON-encoded objects.

Empty values on the API side become null in state, never ``[]`` or ``"{}"``,
so that an unset attribute does not show a diff on every plan.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from unkey_provider.conversions.exceptions import DecodingError, EncodingError
from unkey_provider.framework.values import UnknownValue, is_null_or_unknown


def string_list_to_slice(value: Sequence[str] | None | UnknownValue) -> list[str] | None:
    """Convert a state list to a plain list, or None when null or unknown."""
    if is_null_or_unknown(value):
        return None
    return list(value)  # type: ignore[arg-type]


def slice_to_string_list(items: Sequence[str] | None) -> list[str] | None:
    """Convert an API list to a state list; empty becomes null."""
    if not items:
        return None
    return list(items)


def string_to_map(value: str | None | UnknownValue) -> dict[str, Any] | None:
    """Decode a JSON object stored as a string.

    Raises:
        DecodingError: If the string is not valid JSON, or is JSON other than
            an object or null.
    """
    if is_null_or_unknown(value):
        return None

    try:
        decoded = json.loads(value)  # type: ignore[arg-type]
    except json.JSONDecodeError as e:
        raise DecodingError(f"Error unmarshaling string to map: {e}") from e

    if decoded is None:
        return None
    if not isinstance(decoded, dict):
        raise DecodingError(
            f"Error unmarshaling string to map: expected a JSON object, "
            f"got {type(decoded).__name__}"
        )
    return decoded


def map_to_string(mapping: Mapping[str, Any] | None) -> str | None:
    """Encode a mapping as compact JSON with sorted keys; empty becomes null.

    Raises:
        EncodingError: If the mapping holds values JSON cannot represent.
    """
    if not mapping:
        return None

    try:
        return json.dumps(mapping, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Error marshaling map to string: {e}") from e
