"""Type inference for raw text columns.

Classifies each column as int64, float64 or string in a single pass,
counts nulls, and tracks min/max bounds.
"""

from tablestats.analysis.typing.classifier import (
    ABSENT,
    NULL_TOKENS,
    Bound,
    BoundKind,
    TypeClassifier,
    is_null,
    parse_float,
)

__all__ = [
    "ABSENT",
    "NULL_TOKENS",
    "Bound",
    "BoundKind",
    "TypeClassifier",
    "is_null",
    "parse_float",
]
