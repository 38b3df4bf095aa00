"""Tree reconciliation exports."""

from .reconciliation_outcomes import FlattenedField, ReconciliationResult
from .tree_reconciler import SchemaMismatchError, reconcile, require_reconciled

__all__ = [
    "FlattenedField",
    "ReconciliationResult",
    "SchemaMismatchError",
    "reconcile",
    "require_reconciled",
]
