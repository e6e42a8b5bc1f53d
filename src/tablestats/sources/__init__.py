"""Table sources: one reader per file format."""

from tablestats.sources.base import ReaderBase
from tablestats.sources.csv import DelimitedReader, csv_reader, tsv_reader
from tablestats.sources.parquet import ParquetReader
from tablestats.sources.registry import reader_for_path, supported_extensions

__all__ = [
    "DelimitedReader",
    "ParquetReader",
    "ReaderBase",
    "csv_reader",
    "reader_for_path",
    "supported_extensions",
    "tsv_reader",
]
