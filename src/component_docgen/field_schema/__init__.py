"""Field schema exports."""

from .field_builders import field_advanced, field_common, field_deprecated
from .field_models import (
    ComponentSpec,
    FieldInterpolation,
    FieldSchemaError,
    FieldSpec,
    ensure_unique_names,
)

__all__ = [
    "ComponentSpec",
    "FieldInterpolation",
    "FieldSchemaError",
    "FieldSpec",
    "ensure_unique_names",
    "field_advanced",
    "field_common",
    "field_deprecated",
]
