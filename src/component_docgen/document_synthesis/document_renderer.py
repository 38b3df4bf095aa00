"""Component document synthesis service."""

from __future__ import annotations

import logging
from typing import Any

from component_docgen.config_splitting.config_splitter import split_example
from component_docgen.field_schema.field_models import ComponentSpec
from component_docgen.structured_data.path_access import get_path, path_exists
from component_docgen.structured_data.yaml_marshalling import marshal_yaml, normalize_example
from component_docgen.tree_reconciliation.reconciliation_outcomes import FlattenedField
from component_docgen.tree_reconciliation.tree_reconciler import require_reconciled
from component_docgen.type_inference.type_inferencer import infer_type

from .component_template import render_component_template
from .render_context import MISSING_DESCRIPTION, ComponentContext, FieldContext

_LOGGER = logging.getLogger(__name__)


class UnrecognizedFieldError(Exception):
    """Raised when a declared field cannot be found in the example configuration."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unrecognised field '{path}'")
        self.path = path


def render_component(spec: ComponentSpec, full_example: Any, *, nest: bool = False) -> bytes:
    """Render the markdown document of a component from its spec and a full example.

    Args:
      spec: Component spec holding the field declarations.
      full_example: Full configuration example of the component.
      nest: Also nest both example blocks under the component type.

    Returns:
      The rendered document as UTF-8 bytes.

    Raises:
      SerializationError: If the example cannot be normalized through YAML.
      SplitStructuralMismatchError: If an example value cannot hold declared children.
      SchemaMismatchError: If the example holds fields the component spec does not declare.
      UnrecognizedFieldError: If a declared field is absent from the example.
      TypeInferenceError: If a field type cannot be inferred.
    """
    context = build_component_context(spec, full_example, nest=nest)
    document = render_component_template(context)
    _LOGGER.debug("rendered %s '%s' with %d fields", spec.type, spec.name, len(context.fields))
    return document.encode("utf-8")


def build_component_context(
    spec: ComponentSpec, full_example: Any, *, nest: bool = False
) -> ComponentContext:
    """Assemble the render context of a component document."""
    example = normalize_example(full_example)
    root = spec.type if nest else ""

    split = split_example(spec.fields, example)
    advanced_config = marshal_yaml(_wrap_example(split.advanced, spec.name, root))
    common_config = marshal_yaml(_wrap_example(split.common, spec.name, root))

    flattened: tuple[FlattenedField, ...] = ()
    if spec.fields:
        flattened = require_reconciled(spec.fields, example).fields
    else:
        _LOGGER.debug("%s '%s' declares no fields, documenting raw example", spec.type, spec.name)

    field_contexts = tuple(
        _build_field_context(flattened_field, example)
        for flattened_field in flattened
        if not flattened_field.field.deprecated
    )

    return ComponentContext(
        name=spec.name,
        type=spec.type,
        summary=spec.summary,
        description=_strip_leading_newline(spec.description),
        fields=field_contexts,
        common_config=common_config,
        advanced_config=advanced_config,
    )


def _build_field_context(flattened_field: FlattenedField, example: dict[str, Any]) -> FieldContext:
    path = flattened_field.path
    field = flattened_field.field
    if not path_exists(example, path):
        raise UnrecognizedFieldError(path)

    field_type = infer_type(field, get_path(example, path), path=path)
    examples = tuple(marshal_yaml({path: field_example}) for field_example in field.examples)

    return FieldContext(
        name=path,
        type=field_type,
        description=_strip_leading_newline(field.description or MISSING_DESCRIPTION),
        advanced=field.advanced,
        interpolation=field.interpolation,
        examples=examples,
        options=field.options,
    )


def _wrap_example(example: Any, name: str, root: str) -> dict[str, Any]:
    wrapped: dict[str, Any] = {name: example}
    if root:
        wrapped = {root: wrapped}
    return wrapped


def _strip_leading_newline(text: str) -> str:
    return text[1:] if text.startswith("\n") else text
