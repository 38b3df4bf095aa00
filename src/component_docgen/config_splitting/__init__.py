"""Config splitting exports."""

from .config_splitter import (
    SplitExamples,
    SplitStructuralMismatchError,
    advanced_example,
    common_example,
    split_example,
)

__all__ = [
    "SplitExamples",
    "SplitStructuralMismatchError",
    "advanced_example",
    "common_example",
    "split_example",
]
