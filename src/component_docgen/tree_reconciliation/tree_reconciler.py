"""Reconciliation of declared field trees against example configurations."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from component_docgen.field_schema.field_models import FieldSpec

from .reconciliation_outcomes import FlattenedField, ReconciliationResult

_LOGGER = logging.getLogger(__name__)


class SchemaMismatchError(Exception):
    """Raised when an example configuration holds fields the schema does not declare."""

    def __init__(self, paths: Sequence[str]) -> None:
        super().__init__(f"Spec missing fields: {', '.join(paths)}")
        self.paths = tuple(paths)


def reconcile(fields: Sequence[FieldSpec], root_example: Any) -> ReconciliationResult:
    """Walk the declared fields against the example, depth first.

    Every declaration is flattened into its dotted path in declaration order.
    Keys of the example that no declaration accounts for at their level are
    reported as missing. Declarations absent from the example are not.
    """
    flattened, missing = _walk(fields, root_example, prefix="")
    _LOGGER.debug(
        "reconciled %d declared fields, %d undeclared example paths",
        len(flattened),
        len(missing),
    )
    return ReconciliationResult(fields=tuple(flattened), missing_paths=tuple(missing))


def require_reconciled(fields: Sequence[FieldSpec], root_example: Any) -> ReconciliationResult:
    """Reconcile and raise `SchemaMismatchError` when undeclared paths remain."""
    result = reconcile(fields, root_example)
    if not result.is_reconciled:
        raise SchemaMismatchError(result.missing_paths)
    return result


def _walk(
    fields: Sequence[FieldSpec], node: Any, *, prefix: str, deprecated: bool = False
) -> tuple[list[FlattenedField], list[str]]:
    flattened: list[FlattenedField] = []
    missing: list[str] = []
    unaccounted = dict.fromkeys(_child_keys(node))

    for field in fields:
        unaccounted.pop(field.name, None)
        path = field.name if not prefix else f"{prefix}.{field.name}"
        # Children of a deprecated field are deprecated with it.
        field_deprecated = deprecated or field.deprecated
        flattened.append(
            FlattenedField(
                path=path,
                field=replace(field, children=(), deprecated=field_deprecated),
            )
        )
        if field.children:
            child_node = node.get(field.name) if isinstance(node, Mapping) else None
            child_flattened, child_missing = _walk(
                field.children, child_node, prefix=path, deprecated=field_deprecated
            )
            flattened.extend(child_flattened)
            missing.extend(child_missing)

    missing.extend(str(key) if not prefix else f"{prefix}.{key}" for key in unaccounted)
    return flattened, missing


def _child_keys(node: Any) -> list[Any]:
    if not isinstance(node, Mapping):
        return []
    return list(node)
