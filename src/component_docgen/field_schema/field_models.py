"""Field schema entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class FieldSchemaError(Exception):
    """Raised when a field declaration tree is malformed."""


class FieldInterpolation(str, Enum):
    """Interpolation support documented for a field value."""

    NONE = "none"
    BATCH_WIDE = "batch-wide"
    PER_ITEM = "per-item"


@dataclass(frozen=True)
class FieldSpec:  # pylint: disable=too-many-instance-attributes
    """Declaration of one configuration field."""

    name: str
    type: str = ""
    description: str = ""
    advanced: bool = False
    deprecated: bool = False
    interpolation: FieldInterpolation = FieldInterpolation.NONE
    examples: tuple[Any, ...] = ()
    options: tuple[str, ...] = ()
    children: tuple[FieldSpec, ...] = ()

    def with_type(self, type_name: str) -> FieldSpec:
        """Return a copy with an explicit documentation type."""
        return replace(self, type=type_name)

    def with_options(self, *options: str) -> FieldSpec:
        """Return a copy listing the allowed literal values."""
        return replace(self, options=tuple(options))

    def with_children(self, *children: FieldSpec) -> FieldSpec:
        """Return a copy whose value is an object of the given child fields."""
        return replace(self, children=tuple(children))

    def supports_interpolation(self, batch_wide: bool) -> FieldSpec:
        """Return a copy marked as supporting interpolation functions."""
        interpolation = FieldInterpolation.BATCH_WIDE if batch_wide else FieldInterpolation.PER_ITEM
        return replace(self, interpolation=interpolation)


@dataclass(frozen=True)
class ComponentSpec:
    """Documentation spec of one component and its root field declarations."""

    name: str
    type: str
    summary: str = ""
    description: str = ""
    fields: tuple[FieldSpec, ...] = ()


def ensure_unique_names(fields: Sequence[FieldSpec], *, prefix: str = "") -> None:
    """Raise when two sibling declarations share a name, at any depth."""
    seen: set[str] = set()
    for field in fields:
        path = field.name if not prefix else f"{prefix}.{field.name}"
        if field.name in seen:
            raise FieldSchemaError(f"Duplicate field declaration detected: {path}")
        seen.add(field.name)
        if field.children:
            ensure_unique_names(field.children, prefix=path)
