"""Attribute validators.

Each validator is a small frozen dataclass that is called with a known
(non-null, non-unknown) value and returns an error message, or ``None`` when
the value is acceptable.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from unkey_provider.framework.values import is_unknown


class Validator(Protocol):
    def __call__(self, value: Any) -> str | None: ...


@dataclass(frozen=True)
class LengthBetween:
    minimum: int
    maximum: int

    def __call__(self, value: str) -> str | None:
        if not self.minimum <= len(value) <= self.maximum:
            return (
                f"string length must be between {self.minimum} and "
                f"{self.maximum}, got: {len(value)}"
            )
        return None


@dataclass(frozen=True)
class LengthAtMost:
    maximum: int

    def __call__(self, value: str) -> str | None:
        if len(value) > self.maximum:
            return f"string length must be at most {self.maximum}, got: {len(value)}"
        return None


@dataclass(frozen=True)
class RegexMatches:
    pattern: str
    message: str

    def __call__(self, value: str) -> str | None:
        if re.fullmatch(self.pattern, value) is None:
            return f"{self.message}, got: {value}"
        return None


@dataclass(frozen=True)
class OneOf:
    choices: tuple[str, ...]

    def __call__(self, value: str) -> str | None:
        if value not in self.choices:
            allowed = ", ".join(f'"{c}"' for c in self.choices)
            return f"value must be one of: [{allowed}], got: {value!r}"
        return None


@dataclass(frozen=True)
class Between:
    minimum: int
    maximum: int

    def __call__(self, value: int) -> str | None:
        if not self.minimum <= value <= self.maximum:
            return (
                f"value must be between {self.minimum} and {self.maximum}, "
                f"got: {value}"
            )
        return None


@dataclass(frozen=True)
class AtLeast:
    minimum: int

    def __call__(self, value: int) -> str | None:
        if value < self.minimum:
            return f"value must be at least {self.minimum}, got: {value}"
        return None


@dataclass(frozen=True)
class SizeAtMost:
    maximum: int

    def __call__(self, value: Sequence[Any]) -> str | None:
        if len(value) > self.maximum:
            return (
                f"list must contain at most {self.maximum} elements, "
                f"got: {len(value)}"
            )
        return None


@dataclass(frozen=True)
class ValueStringsAre:
    """Apply string validators to every element of a list."""

    validators: tuple[Validator, ...]

    def __call__(self, value: Sequence[str]) -> str | None:
        for index, element in enumerate(value):
            for validator in self.validators:
                error = validator(element)
                if error is not None:
                    return f"element {index}: {error}"
        return None


@dataclass(frozen=True)
class OnlyWhenEquals:
    """Allow an object's ``field`` to be set only while ``other`` equals ``expected``.

    Unknown values on either side are not judged.
    """

    field: str
    other: str
    expected: str

    def __call__(self, value: Any) -> str | None:
        field_value = getattr(value, self.field, None)
        other_value = getattr(value, self.other, None)
        if field_value is None or is_unknown(field_value) or is_unknown(other_value):
            return None
        if other_value != self.expected:
            return (
                f"{self.field} can only be set when {self.other} is "
                f'"{self.expected}", got: {other_value!r}'
            )
        return None
