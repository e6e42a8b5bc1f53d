"""Delimited file reader - full scan for small files, sampling for large ones."""

from __future__ import annotations

import csv
import os
import random
import time
from pathlib import Path

from tablestats.analysis.statistics import TableStats, analyze_columns
from tablestats.core.errors import EmptyFileError, HeaderError, TableIOError
from tablestats.core.logging import get_logger, log_context
from tablestats.core.models import SamplingConfig, validate_config
from tablestats.sources.base import ReaderBase
from tablestats.sources.csv.sampling import (
    LineSource,
    estimate_row_count,
    estimate_row_interval,
    has_bare_quote,
    iter_records,
    sample_records,
)

logger = get_logger(__name__)


class DelimitedReader(ReaderBase):
    """Reader for comma- or tab-separated files.

    Files up to config.max_file_size bytes are read entirely. Larger files
    are sampled at random byte offsets and their row count is extrapolated.
    """

    def __init__(
        self,
        delimiter: str = ",",
        name: str = "CSV",
        rng: random.Random | None = None,
    ):
        self.delimiter = delimiter
        self.name = name
        self.rng = rng or random.Random()

    @property
    def format_name(self) -> str:
        return self.name

    def read_table(self, file_path: str | Path, config: SamplingConfig) -> TableStats:
        """Read a delimited file and compute its statistics.

        Args:
            file_path: Path to the file
            config: Sampling configuration

        Returns:
            TableStats for the file

        Raises:
            ConfigError: If config is invalid (checked before any I/O)
            TableIOError: If the file cannot be opened or read
            EmptyFileError: If the file has zero bytes
            HeaderError: If the header record cannot be parsed
        """
        validate_config(config)
        path = Path(file_path)
        start_time = time.time()

        with log_context(path=str(path), format=self.name):
            try:
                handle = path.open("rb")
            except OSError as e:
                raise TableIOError(f"failed to open file: {e}") from e

            with handle:
                try:
                    file_size = os.fstat(handle.fileno()).st_size
                except OSError as e:
                    raise TableIOError(f"failed to get file info: {e}") from e

                logger.info("table_read_started", file_size=file_size)

                if file_size == 0:
                    raise EmptyFileError(f"failed to read header: {path} is empty")

                lines = LineSource(handle)
                header = self._read_header(lines, path)
                lines.errors = "replace"

                if file_size <= config.max_file_size:
                    try:
                        records = list(iter_records(lines, self.delimiter))
                    except OSError as e:
                        raise TableIOError(f"failed to read {path.name}: {e}") from e
                    stats_fields = {
                        "row_count": len(records),
                        "estimated_rows": len(records),
                    }
                else:
                    batch = sample_records(handle, file_size, config, self.delimiter, self.rng)
                    records = batch.records
                    estimated = estimate_row_count(file_size, batch.bytes_consumed, config)
                    stats_fields = {
                        "row_count": len(records),
                        "estimated_rows": estimated if batch.bytes_consumed else len(records),
                        "sampled": True,
                        "bytes_sampled": batch.bytes_consumed,
                        "estimated_rows_interval": estimate_row_interval(
                            file_size, batch.positions, config.confidence
                        ),
                    }
                    logger.info(
                        "sampling_finished",
                        records=len(records),
                        bytes_consumed=batch.bytes_consumed,
                        positions_read=len(batch.positions),
                        positions_skipped=batch.positions_skipped,
                    )

            stats = self._build_stats(header, records, file_size, config, stats_fields)
            logger.info(
                "table_read_finished",
                rows=stats.row_count,
                estimated_rows=stats.estimated_rows,
                duration_seconds=round(time.time() - start_time, 3),
            )
            return stats

    def _read_header(self, lines: LineSource, path: Path) -> list[str]:
        """Parse the first non-blank record as the header."""
        reader = csv.reader(lines, delimiter=self.delimiter, strict=True)
        try:
            header = next(reader)
            while not header:
                lines.take_pending()
                header = next(reader)
        except StopIteration as e:
            raise HeaderError(f"failed to read header: {path} has no records") from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise HeaderError(f"failed to read header: {e}") from e
        except OSError as e:
            raise TableIOError(f"failed to read header: {e}") from e

        if has_bare_quote(lines.take_pending(), self.delimiter):
            raise HeaderError("failed to read header: bare quote in non-quoted field")
        return header

    def _build_stats(
        self,
        header: list[str],
        records: list[list[str]],
        file_size: int,
        config: SamplingConfig,
        stats_fields: dict[str, object],
    ) -> TableStats:
        common = {
            "format_name": self.name,
            "file_size": file_size,
            "sampling_config": config,
            **stats_fields,
        }
        if not records:
            return TableStats(column_count=len(header), column_names=header, **common)

        columns = analyze_columns(records, header)
        return TableStats.from_columns(columns, records, **common)


def csv_reader(rng: random.Random | None = None) -> DelimitedReader:
    """Reader for comma-separated files."""
    return DelimitedReader(delimiter=",", name="CSV", rng=rng)


def tsv_reader(rng: random.Random | None = None) -> DelimitedReader:
    """Reader for tab-separated files."""
    return DelimitedReader(delimiter="\t", name="TSV", rng=rng)
