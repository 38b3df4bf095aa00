"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from component_docgen.field_schema.field_models import ComponentSpec


@dataclass(frozen=True)
class ComponentDefinition:
    """Component spec and full configuration example loaded from one file."""

    path: Path
    spec: ComponentSpec
    example: Any
