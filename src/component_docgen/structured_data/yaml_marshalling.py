"""YAML normalization and marshalling of example configuration values."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

import yaml


class SerializationError(Exception):
    """Raised when a value cannot be converted to or from YAML text."""


class _ExampleDumper(yaml.SafeDumper):
    """Safe dumper that writes tuples as plain sequences and never emits aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


_ExampleDumper.add_representer(tuple, yaml.SafeDumper.represent_list)


def marshal_yaml(value: Any) -> str:
    """Serialize a plain structured value into block-style YAML text."""
    try:
        return yaml.dump(
            value,
            Dumper=_ExampleDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"Failed to serialize value to YAML: {exc}") from exc


def normalize_example(value: Any) -> dict[str, Any]:
    """Round-trip an example through YAML into a mapping of plain values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    text = marshal_yaml(value)
    try:
        normalized = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - dumper output is always loadable
        raise SerializationError(f"Failed to parse serialized example: {exc}") from exc

    if normalized is None:
        return {}
    if not isinstance(normalized, Mapping):
        raise SerializationError(
            f"Example configuration must be a mapping, got {type(normalized).__name__}."
        )
    return dict(normalized)
