"""Render context entities consumed by the component template."""

from __future__ import annotations

from dataclasses import dataclass

from component_docgen.field_schema.field_models import FieldInterpolation

MISSING_DESCRIPTION = "Sorry! This field is missing documentation."


@dataclass(frozen=True)
class FieldContext:  # pylint: disable=too-many-instance-attributes
    """Documentation entry of one flattened field."""

    name: str
    type: str
    description: str
    advanced: bool
    interpolation: FieldInterpolation
    examples: tuple[str, ...]
    options: tuple[str, ...]


@dataclass(frozen=True)
class ComponentContext:  # pylint: disable=too-many-instance-attributes
    """Everything the component template needs to render one document."""

    name: str
    type: str
    summary: str
    description: str
    fields: tuple[FieldContext, ...]
    common_config: str
    advanced_config: str
