"""Declarative attribute schemas for the provider and its resources.

Schemas describe the shape of Terraform state for a resource model (a
dataclass whose field names equal the attribute names). Besides documenting
the resource, a schema can validate a model and evaluate plan modifiers.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

from unkey_provider.framework.diagnostics import Diagnostics
from unkey_provider.framework.plan_modifiers import RequiresReplace, UseStateForUnknown
from unkey_provider.framework.validators import Validator
from unkey_provider.framework.values import UNKNOWN, is_unknown

M = TypeVar("M")


@dataclass(frozen=True, kw_only=True)
class Attribute:
    type_name: ClassVar[str] = "dynamic"

    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    validators: tuple[Validator, ...] = ()
    plan_modifiers: tuple[Any, ...] = ()

    def has_modifier(self, modifier_type: type) -> bool:
        return any(isinstance(m, modifier_type) for m in self.plan_modifiers)


@dataclass(frozen=True, kw_only=True)
class StringAttribute(Attribute):
    type_name: ClassVar[str] = "string"


@dataclass(frozen=True, kw_only=True)
class Int64Attribute(Attribute):
    type_name: ClassVar[str] = "int64"


@dataclass(frozen=True, kw_only=True)
class BoolAttribute(Attribute):
    type_name: ClassVar[str] = "bool"


@dataclass(frozen=True, kw_only=True)
class ListAttribute(Attribute):
    type_name: ClassVar[str] = "list"

    element_type: str = "string"


@dataclass(frozen=True, kw_only=True)
class SingleNestedAttribute(Attribute):
    type_name: ClassVar[str] = "object"

    attributes: Mapping[str, Attribute] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class ListNestedAttribute(Attribute):
    type_name: ClassVar[str] = "list(object)"

    attributes: Mapping[str, Attribute] = field(default_factory=dict)


@dataclass(frozen=True)
class Schema:
    attributes: Mapping[str, Attribute]
    description: str = ""

    def validate(self, model: Any) -> Diagnostics:
        """Check required attributes and run validators against a model.

        Unknown values are skipped since they cannot be judged until apply.
        """
        diagnostics = Diagnostics()
        _validate_attributes(self.attributes, model, "", diagnostics)
        return diagnostics

    def requires_replace(self, plan: Any, state: Any) -> list[str]:
        """Return the top-level attribute paths whose change forces replacement."""
        paths = []
        for name, attribute in self.attributes.items():
            if not attribute.has_modifier(RequiresReplace):
                continue
            planned = getattr(plan, name, None)
            if is_unknown(planned):
                continue
            if planned != getattr(state, name, None):
                paths.append(name)
        return paths

    def apply_plan_modifiers(self, plan: M, state: Any) -> M:
        """Fill unknown computed values from prior state where requested."""
        if state is None:
            return plan
        carried = {}
        for name, attribute in self.attributes.items():
            if not attribute.has_modifier(UseStateForUnknown):
                continue
            if getattr(plan, name, None) is UNKNOWN:
                carried[name] = getattr(state, name, None)
        if not carried:
            return plan
        return dataclasses.replace(plan, **carried)  # type: ignore[type-var]


def _validate_attributes(
    attributes: Mapping[str, Attribute],
    obj: Any,
    prefix: str,
    diagnostics: Diagnostics,
) -> None:
    for name, attribute in attributes.items():
        path = f"{prefix}{name}"
        value = getattr(obj, name, None)

        if is_unknown(value):
            continue

        if value is None:
            if attribute.required:
                diagnostics.add_attribute_error(
                    path,
                    "Missing required argument",
                    f'The argument "{path}" is required, but no definition was found.',
                )
            continue

        for validator in attribute.validators:
            error = validator(value)
            if error is not None:
                diagnostics.add_attribute_error(
                    path, "Invalid Attribute Value", f"Attribute {path} {error}"
                )

        if isinstance(attribute, SingleNestedAttribute):
            _validate_attributes(attribute.attributes, value, f"{path}.", diagnostics)
        elif isinstance(attribute, ListNestedAttribute):
            for index, element in enumerate(value):
                _validate_attributes(
                    attribute.attributes, element, f"{path}[{index}].", diagnostics
                )
