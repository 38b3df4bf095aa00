"""Dotted-path access into nested mappings and sequences."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_MISSING = object()


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted path into its segments, ignoring empty ones."""
    return tuple(segment for segment in path.split(".") if segment)


def path_exists(data: Any, path: str) -> bool:
    """Return whether every segment of `path` resolves inside `data`."""
    return _resolve(data, split_path(path)) is not _MISSING


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """Return the value found at `path`, or `default` when it does not resolve."""
    value = _resolve(data, split_path(path))
    return default if value is _MISSING else value


def _resolve(data: Any, segments: tuple[str, ...]) -> Any:
    current = data
    for segment in segments:
        if isinstance(current, Mapping):
            if segment not in current:
                return _MISSING
            current = current[segment]
        elif _is_sequence(current) and segment.isdigit():
            index = int(segment)
            if index >= len(current):
                return _MISSING
            current = current[index]
        else:
            return _MISSING
    return current


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
