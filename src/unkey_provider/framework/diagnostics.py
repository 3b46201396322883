"""Diagnostics returned from every provider and resource operation.

Operations never raise for user-facing failures. They append diagnostics
instead and the host decides how to present them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single structured warning or error.

    Attributes:
        severity: Whether the diagnostic is fatal for the operation.
        summary: Short, human-readable headline.
        detail: Longer explanation, usually carrying the underlying error text.
        attribute: Dotted attribute path the diagnostic refers to, if any.
    """

    severity: Severity
    summary: str
    detail: str = ""
    attribute: str | None = None


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics."""

    _items: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def append(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self._items.extend(diagnostics)

    def add_error(self, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(Severity.ERROR, summary, detail))

    def add_warning(self, summary: str, detail: str = "") -> None:
        self._items.append(Diagnostic(Severity.WARNING, summary, detail))

    def add_attribute_error(self, attribute: str, summary: str, detail: str = "") -> None:
        self._items.append(
            Diagnostic(Severity.ERROR, summary, detail, attribute=attribute)
        )

    def has_error(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._items)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.ERROR]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self._items if d.severity is Severity.WARNING]
