"""Configuration domain exports."""

from .component_definition import ComponentDefinition
from .config_scaffold_builder import (
    DEFAULT_DEFINITION_FILENAME,
    build_placeholder_definition,
    write_placeholder_definition,
)
from .loader import ComponentDefinitionError, load_component_definition, parse_component_spec

__all__ = [
    "ComponentDefinition",
    "ComponentDefinitionError",
    "load_component_definition",
    "parse_component_spec",
    "DEFAULT_DEFINITION_FILENAME",
    "build_placeholder_definition",
    "write_placeholder_definition",
]
