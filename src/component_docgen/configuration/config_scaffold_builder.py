"""Component definition scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_DEFINITION_FILENAME = "component.yaml"

_DEFINITION_SCAFFOLD_TEMPLATE = """# Component definition template for component-docgen.
# Replace every <REQUIRED> placeholder before running render or check.
# Replace <OPTIONAL> placeholders only when the component needs them.

name: "<REQUIRED>"
# Category of the component, for example input, processor or output.
type: "<REQUIRED>"
summary: "<OPTIONAL>"
description: |
  <OPTIONAL>

# Every key of the example below must be declared here, at every nesting level
# reached through children. Leave fields empty to document the example as-is.
fields:
  - name: "<REQUIRED>"
    description: "<OPTIONAL>"
    # type is inferred from the first example, or from the example below.
    # type: "<OPTIONAL>"
    # advanced: false
    # deprecated: false
    # interpolation: none  # none, batch-wide or per-item
    examples:
      - "<OPTIONAL>"
    # options:
    #   - "<OPTIONAL>"
    # children:
    #   - name: "<OPTIONAL>"

# Full configuration example of the component, with every declared field set.
example:
  "<REQUIRED>": "<REQUIRED>"
"""


def build_placeholder_definition() -> str:
    """Build a YAML component definition template with placeholders and inline guidance."""
    return _DEFINITION_SCAFFOLD_TEMPLATE


def write_placeholder_definition(output_path: Path | str) -> Path:
    """Write the placeholder component definition to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Component definition file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_definition(), encoding="utf-8")
    return destination.resolve()
