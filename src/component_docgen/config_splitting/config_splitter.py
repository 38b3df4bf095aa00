"""Derivation of common and advanced configuration examples."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from component_docgen.field_schema.field_models import FieldSpec

_LOGGER = logging.getLogger(__name__)

FieldFilter = Callable[[FieldSpec], bool]


class SplitStructuralMismatchError(Exception):
    """Raised when an example value cannot hold the declared child fields."""

    def __init__(self, path: str, value: Any) -> None:
        location = path or "<root>"
        super().__init__(
            f"Expected an object at '{location}' to split declared fields, "
            f"got {type(value).__name__}."
        )
        self.path = path


@dataclass(frozen=True)
class SplitExamples:
    """Advanced and common variants of one full configuration example."""

    advanced: Any
    common: Any


def split_example(fields: Sequence[FieldSpec], full_example: Any) -> SplitExamples:
    """Split a full example into its advanced and common variants.

    Without declared fields there is nothing to split on, and both variants are
    the full example itself.

    Raises:
      SplitStructuralMismatchError: If a value holding declared fields is not a mapping.
    """
    if not fields:
        return SplitExamples(advanced=full_example, common=full_example)

    advanced = advanced_example(fields, full_example)
    common = common_example(fields, advanced)
    _LOGGER.debug(
        "split example into %d advanced and %d common top-level fields",
        len(advanced),
        len(common),
    )
    return SplitExamples(advanced=advanced, common=common)


def advanced_example(fields: Sequence[FieldSpec], example: Any) -> dict[str, Any]:
    """Return the example restricted to non-deprecated declared fields."""
    return _filter_example(fields, example, keep=_is_not_deprecated, prefix="")


def common_example(fields: Sequence[FieldSpec], example: Any) -> dict[str, Any]:
    """Return the example restricted to non-deprecated, non-advanced declared fields."""
    return _filter_example(fields, example, keep=_is_common, prefix="")


def _filter_example(
    fields: Sequence[FieldSpec], example: Any, *, keep: FieldFilter, prefix: str
) -> dict[str, Any]:
    if not isinstance(example, Mapping):
        raise SplitStructuralMismatchError(prefix, example)

    filtered: dict[str, Any] = {}
    for field in fields:
        if not keep(field) or field.name not in example:
            continue
        value = example[field.name]
        if field.children:
            child_prefix = field.name if not prefix else f"{prefix}.{field.name}"
            filtered[field.name] = _filter_example(
                field.children, value, keep=keep, prefix=child_prefix
            )
        else:
            filtered[field.name] = value
    return filtered


def _is_not_deprecated(field: FieldSpec) -> bool:
    return not field.deprecated


def _is_common(field: FieldSpec) -> bool:
    return not field.deprecated and not field.advanced
