"""Sequence comparison domain exports."""

from .action_sequence_comparator import compare_contains, compare_exact
from .comparison_outcomes import (
    ComparisonResult,
    LengthMismatch,
    LengthMismatchKind,
    check_lengths,
)
from .type_sequence_comparator import (
    DEFAULT_DISCRIMINANT_FIELD,
    compare_contains_types,
    compare_exact_types,
    project_types,
)

__all__ = [
    "ComparisonResult",
    "LengthMismatch",
    "LengthMismatchKind",
    "check_lengths",
    "compare_exact",
    "compare_contains",
    "compare_exact_types",
    "compare_contains_types",
    "project_types",
    "DEFAULT_DISCRIMINANT_FIELD",
]
