"""Reader selection by file extension."""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path

from tablestats.core.errors import UnsupportedFormatError
from tablestats.sources.base import ReaderBase
from tablestats.sources.csv import csv_reader, tsv_reader
from tablestats.sources.parquet import ParquetReader

_READERS: dict[str, Callable[[random.Random | None], ReaderBase]] = {
    ".csv": csv_reader,
    ".tsv": tsv_reader,
    ".parquet": lambda rng: ParquetReader(),
}


def supported_extensions() -> list[str]:
    """Extensions with a registered reader."""
    return sorted(_READERS)


def reader_for_path(file_path: str | Path, rng: random.Random | None = None) -> ReaderBase:
    """Pick the reader for a file from its extension (case-insensitive).

    Args:
        file_path: Path to the file
        rng: Random source handed to sampling readers

    Raises:
        UnsupportedFormatError: If no reader handles the extension
    """
    ext = Path(file_path).suffix.lower()
    factory = _READERS.get(ext)
    if factory is None:
        raise UnsupportedFormatError(
            f"cannot auto-detect delimiter for {ext or 'files without extension'}, "
            f"unsupported file type (supported: {', '.join(supported_extensions())})"
        )
    return factory(rng)
