"""Attribute value primitives shared by plans and states.

A Terraform attribute is either known, null or unknown. Null is modelled as
``None``; unknown (a value that will only be decided during apply) is the
``UNKNOWN`` singleton.
"""

from __future__ import annotations

from typing import Any, Final


class UnknownValue:
    """Marker for a plan value that is not yet known."""

    _instance: UnknownValue | None = None

    def __new__(cls) -> UnknownValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN"

    def __copy__(self) -> UnknownValue:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> UnknownValue:
        return self


UNKNOWN: Final = UnknownValue()


def is_unknown(value: Any) -> bool:
    return value is UNKNOWN


def is_null_or_unknown(value: Any) -> bool:
    """Return True when the value carries no usable data."""
    return value is None or value is UNKNOWN


def is_known(value: Any) -> bool:
    return not is_null_or_unknown(value)


def known_or_none(value: Any) -> Any:
    """Return the value, mapping unknown to None."""
    return None if value is UNKNOWN else value
