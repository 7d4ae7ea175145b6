"""Change detection exports."""

from .diff_outcomes import BreakingChanges, DiffReport, NonBreakingChanges, TypeChange
from .diff_summarizer import diff_schemas, summarize_diff
from .type_compatibility import is_type_compatible

__all__ = [
    "BreakingChanges",
    "DiffReport",
    "NonBreakingChanges",
    "TypeChange",
    "diff_schemas",
    "is_type_compatible",
    "summarize_diff",
]
