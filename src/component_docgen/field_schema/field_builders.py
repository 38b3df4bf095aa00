"""Shorthand constructors for field declarations."""

from __future__ import annotations

from typing import Any

from .field_models import FieldSpec


def field_common(name: str, description: str, *examples: Any) -> FieldSpec:
    """Declare a field shown in the common configuration example."""
    return FieldSpec(name=name, description=description, examples=tuple(examples))


def field_advanced(name: str, description: str, *examples: Any) -> FieldSpec:
    """Declare a field shown only in the advanced configuration example."""
    return FieldSpec(
        name=name,
        description=description,
        advanced=True,
        examples=tuple(examples),
    )


def field_deprecated(name: str) -> FieldSpec:
    """Declare a field kept for compatibility and left out of the documentation."""
    return FieldSpec(
        name=name,
        description="DEPRECATED: Do not use.",
        advanced=True,
        deprecated=True,
    )
