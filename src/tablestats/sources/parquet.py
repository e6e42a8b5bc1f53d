"""Parquet reader placeholder.

The format is recognised so that .parquet paths get a clear error instead of
an "unsupported file type" one, but no read path exists yet.
"""

from __future__ import annotations

from pathlib import Path

from tablestats.analysis.statistics import TableStats
from tablestats.core.errors import UnsupportedFormatError
from tablestats.core.models import SamplingConfig
from tablestats.sources.base import ReaderBase


class ParquetReader(ReaderBase):
    """Reader for Parquet files. read_table always fails."""

    @property
    def format_name(self) -> str:
        return "Parquet"

    def read_table(self, file_path: str | Path, config: SamplingConfig) -> TableStats:
        raise UnsupportedFormatError(
            f"parquet reader not implemented, cannot read {Path(file_path).name}"
        )
