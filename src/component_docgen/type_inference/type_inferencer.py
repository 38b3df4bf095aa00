"""Display type inference for documented fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from component_docgen.field_schema.field_models import FieldSpec

_DISPLAY_TYPES: Mapping[str, str] = {
    "map": "object",
    "slice": "array",
    "float": "number",
    "float64": "number",
    "int": "number",
    "int64": "number",
}


class TypeInferenceError(Exception):
    """Raised when neither declaration nor example data reveals a field type."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unable to infer type of '{path}'")
        self.path = path


def infer_type(field: FieldSpec, value_at_path: Any = None, *, path: str | None = None) -> str:
    """Return the documentation type of a field.

    An explicit declared type wins. Otherwise the kind of the field's first
    example is used, then the kind of the value found at the field's path in
    the example configuration.

    Raises:
      TypeInferenceError: If no source yields a kind.
    """
    if field.type:
        return normalize_type(field.type)

    kind = value_kind(field.examples[0]) if field.examples else None
    if kind is None:
        kind = value_kind(value_at_path)
    if kind is None:
        raise TypeInferenceError(path or field.name)
    return normalize_type(kind)


def value_kind(value: Any) -> str | None:
    """Return the primitive kind tag of a plain structured value."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, Sequence) and not isinstance(value, bytes):
        return "slice"
    return type(value).__name__


def normalize_type(kind: str) -> str:
    """Map a raw kind name onto the documentation type vocabulary."""
    return _DISPLAY_TYPES.get(kind, kind)
