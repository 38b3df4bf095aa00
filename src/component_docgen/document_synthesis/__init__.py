"""Document synthesis exports."""

from .component_template import COMPONENT_TEMPLATE_TEXT, render_component_template
from .document_renderer import UnrecognizedFieldError, build_component_context, render_component
from .render_context import MISSING_DESCRIPTION, ComponentContext, FieldContext

__all__ = [
    "COMPONENT_TEMPLATE_TEXT",
    "MISSING_DESCRIPTION",
    "ComponentContext",
    "FieldContext",
    "UnrecognizedFieldError",
    "build_component_context",
    "render_component",
    "render_component_template",
]
