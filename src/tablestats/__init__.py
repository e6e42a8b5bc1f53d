"""tablestats - statistics for delimited files, sampled when they are large.

Example:
    from tablestats import SamplingConfig, StatisticsGenerator, reader_for_path

    config = SamplingConfig(sample_size=1000, random_positions=5)
    generator = StatisticsGenerator(reader_for_path("data.csv"), config)
    stats = generator.generate_stats("data.csv").unwrap()
    stats.estimated_rows
    stats.column_types["age"]
"""

__version__ = "0.1.0"

from tablestats.analysis.statistics import AggregateStats, ColumnStats, TableStats
from tablestats.core.models import ColumnType, Result, SamplingConfig
from tablestats.generator import StatisticsGenerator
from tablestats.sources import reader_for_path

__all__ = [
    "AggregateStats",
    "ColumnStats",
    "ColumnType",
    "Result",
    "SamplingConfig",
    "StatisticsGenerator",
    "TableStats",
    "__version__",
    "reader_for_path",
]
