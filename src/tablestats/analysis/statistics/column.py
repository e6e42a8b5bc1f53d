"""Column analyzer.

Runs the type classifier over one column of the row matrix and turns the
observations into ColumnStats.
"""

from __future__ import annotations

from collections.abc import Sequence

from tablestats.analysis.statistics.aggregates import calculate_aggregates
from tablestats.analysis.statistics.models import ColumnStats
from tablestats.analysis.typing import TypeClassifier


def analyze_column(
    records: Sequence[Sequence[str]],
    col_idx: int,
    col_name: str,
) -> ColumnStats:
    """Analyze one column across every collected record.

    Records shorter than col_idx + 1 count as null for this column.

    Args:
        records: Parsed rows, raw strings
        col_idx: Position of the column in each record
        col_name: Header name of the column

    Returns:
        ColumnStats with type, null rate, min/max and numeric aggregates
    """
    classifier = TypeClassifier()
    for record in records:
        if col_idx >= len(record):
            classifier.observe_missing()
            continue
        classifier.observe(record[col_idx])

    column_type = classifier.column_type
    aggregates = None
    if column_type.is_numeric and classifier.numeric_values:
        aggregates = calculate_aggregates(classifier.numeric_values)

    total = len(records)
    null_percentage = classifier.null_count / total * 100 if total else 0.0

    return ColumnStats(
        name=col_name,
        column_type=column_type,
        null_count=classifier.null_count,
        null_percentage=null_percentage,
        min_value=classifier.min_bound.value(),
        max_value=classifier.max_bound.value(),
        aggregates=aggregates,
    )


def analyze_columns(
    records: Sequence[Sequence[str]],
    column_names: Sequence[str],
) -> list[ColumnStats]:
    """Analyze every column in header order."""
    return [analyze_column(records, idx, name) for idx, name in enumerate(column_names)]
