"""Type inference exports."""

from .type_inferencer import TypeInferenceError, infer_type, normalize_type, value_kind

__all__ = ["TypeInferenceError", "infer_type", "normalize_type", "value_kind"]
