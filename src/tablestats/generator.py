"""Statistics generator - runs a reader strategy against files."""

from __future__ import annotations

from pathlib import Path

from tablestats.analysis.statistics import TableStats
from tablestats.core.errors import TableStatsError
from tablestats.core.logging import get_logger
from tablestats.core.models import Result, SamplingConfig, validate_config
from tablestats.sources.base import ReaderBase

logger = get_logger(__name__)


class StatisticsGenerator:
    """Generates TableStats using a swappable reader.

    The config is validated once at construction, before any file is touched.
    """

    def __init__(self, reader: ReaderBase, config: SamplingConfig):
        validate_config(config)
        self.reader = reader
        self.config = config

    def set_reader(self, reader: ReaderBase) -> None:
        """Change the reader strategy."""
        self.reader = reader

    def generate_stats(self, file_path: str | Path) -> Result[TableStats]:
        """Analyze a file with the current reader.

        Args:
            file_path: Path to the file

        Returns:
            Result containing TableStats, or the error message on failure
        """
        try:
            stats = self.reader.read_table(file_path, self.config)
        except TableStatsError as e:
            logger.warning(
                "table_analysis_failed",
                path=str(file_path),
                format=self.reader.format_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Result.fail(str(e))
        return Result.ok(stats)
