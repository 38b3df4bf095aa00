"""Structured data access and YAML helpers."""

from .path_access import get_path, path_exists, split_path
from .yaml_marshalling import SerializationError, marshal_yaml, normalize_example

__all__ = [
    "SerializationError",
    "get_path",
    "marshal_yaml",
    "normalize_example",
    "path_exists",
    "split_path",
]
