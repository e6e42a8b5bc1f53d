"""Base classes for table readers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from tablestats.analysis.statistics import TableStats
from tablestats.core.models import SamplingConfig


class ReaderBase(ABC):
    """Base class for all table readers.

    Each reader handles one file format. Formats that differ only in a
    parameter (CSV and TSV differ only in the delimiter) share one reader
    class configured with that parameter.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Human-readable name of the format."""
        pass

    @abstractmethod
    def read_table(self, file_path: str | Path, config: SamplingConfig) -> TableStats:
        """Read a file and compute its statistics.

        Args:
            file_path: Path to the file
            config: Sampling configuration

        Returns:
            TableStats for the file

        Raises:
            TableStatsError: If the file cannot be analyzed
        """
        pass
