"""Component definition loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from component_docgen.field_schema.field_models import (
    ComponentSpec,
    FieldInterpolation,
    FieldSchemaError,
    FieldSpec,
    ensure_unique_names,
)

from .component_definition import ComponentDefinition

_FIELD_KEYS = frozenset(
    {
        "name",
        "type",
        "description",
        "advanced",
        "deprecated",
        "interpolation",
        "examples",
        "options",
        "children",
    }
)


class ComponentDefinitionError(Exception):
    """Raised when the component definition file is invalid."""


def load_component_definition(definition_path: Path | str) -> ComponentDefinition:
    """Load and validate a component definition file."""
    path = Path(definition_path)
    if not path.exists():
        raise ComponentDefinitionError(f"Component definition file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ComponentDefinitionError(f"Failed to read component definition: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ComponentDefinitionError(f"Failed to parse component definition: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ComponentDefinitionError("Component definition root must be a mapping.")

    spec = parse_component_spec(parsed)
    return ComponentDefinition(path=path, spec=spec, example=parsed.get("example"))


def parse_component_spec(section: Mapping[str, Any]) -> ComponentSpec:
    """Build a component spec from the mapping form of a definition."""
    name = _require_non_empty_string(section.get("name"), "name")
    component_type = _require_non_empty_string(section.get("type"), "type")
    summary = _optional_text(section.get("summary"), "summary")
    description = _optional_text(section.get("description"), "description")
    fields = _parse_fields(section.get("fields"), prefix="")
    try:
        ensure_unique_names(fields)
    except FieldSchemaError as exc:
        raise ComponentDefinitionError(str(exc)) from exc

    return ComponentSpec(
        name=name,
        type=component_type,
        summary=summary,
        description=description,
        fields=fields,
    )


def _parse_fields(value: Any, *, prefix: str) -> tuple[FieldSpec, ...]:
    label = f"{prefix}.children" if prefix else "fields"
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ComponentDefinitionError(f"{label} must be a list of field mappings.")
    return tuple(_parse_field(item, prefix=prefix) for item in value)


def _parse_field(value: Any, *, prefix: str) -> FieldSpec:
    if not isinstance(value, Mapping):
        raise ComponentDefinitionError(
            f"Field declarations under '{prefix or 'fields'}' must be mappings."
        )
    name = _require_non_empty_string(value.get("name"), f"{prefix or 'fields'}.name")
    path = name if not prefix else f"{prefix}.{name}"

    unknown_keys = sorted(str(key) for key in value if key not in _FIELD_KEYS)
    if unknown_keys:
        raise ComponentDefinitionError(
            f"Field '{path}' has unknown keys: {', '.join(unknown_keys)}."
        )

    return FieldSpec(
        name=name,
        type=_optional_text(value.get("type"), f"{path}.type").strip(),
        description=_optional_text(value.get("description"), f"{path}.description"),
        advanced=_optional_bool(value.get("advanced"), f"{path}.advanced"),
        deprecated=_optional_bool(value.get("deprecated"), f"{path}.deprecated"),
        interpolation=_parse_interpolation(value.get("interpolation"), f"{path}.interpolation"),
        examples=_normalize_sequence(value.get("examples"), f"{path}.examples"),
        options=tuple(
            str(option)
            for option in _normalize_sequence(value.get("options"), f"{path}.options")
        ),
        children=_parse_fields(value.get("children"), prefix=path),
    )


def _parse_interpolation(value: Any, field_name: str) -> FieldInterpolation:
    if value is None:
        return FieldInterpolation.NONE
    if not isinstance(value, str):
        raise ComponentDefinitionError(f"{field_name} must be a string.")
    try:
        return FieldInterpolation(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in FieldInterpolation)
        raise ComponentDefinitionError(f"{field_name} must be one of: {allowed}.") from exc


def _normalize_sequence(value: Any, field_name: str) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ComponentDefinitionError(f"{field_name} must be a list.")
    return tuple(value)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ComponentDefinitionError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ComponentDefinitionError(f"{field_name} must not be empty.")
    return stripped


def _optional_text(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ComponentDefinitionError(f"{field_name} must be a string.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ComponentDefinitionError(f"{field_name} must be a boolean.")
    return value
