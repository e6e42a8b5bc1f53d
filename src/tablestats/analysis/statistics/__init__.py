"""Statistical profiling module.

Computes column-level statistics on raw text rows:
- Type (int64, float64, string)
- Null counts and null percentage
- Min/max values
- Numeric aggregates (sum, mean, median, variance, stddev)
- Percentiles (p25, p50, p75, p90, p95, p99)
"""

from tablestats.analysis.statistics.aggregates import (
    calculate_aggregates,
    calculate_percentile,
)
from tablestats.analysis.statistics.column import analyze_column, analyze_columns
from tablestats.analysis.statistics.models import (
    PERCENTILE_RANKS,
    SAMPLE_PREVIEW_ROWS,
    AggregateStats,
    ColumnStats,
    TableStats,
)

__all__ = [
    # Main entry points
    "analyze_column",
    "analyze_columns",
    "calculate_aggregates",
    "calculate_percentile",
    # Pydantic Models
    "AggregateStats",
    "ColumnStats",
    "TableStats",
    # Constants
    "PERCENTILE_RANKS",
    "SAMPLE_PREVIEW_ROWS",
]
