"""Tree reconciliation entities."""

from __future__ import annotations

from dataclasses import dataclass

from component_docgen.field_schema.field_models import FieldSpec


@dataclass(frozen=True)
class FlattenedField:
    """Field declaration addressed by its fully qualified dotted path."""

    path: str
    field: FieldSpec


@dataclass(frozen=True)
class ReconciliationResult:
    """Flattened declarations and example paths missing from the schema."""

    fields: tuple[FlattenedField, ...]
    missing_paths: tuple[str, ...]

    @property
    def is_reconciled(self) -> bool:
        return not self.missing_paths
