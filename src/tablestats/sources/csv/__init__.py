"""Delimited (CSV/TSV) sources with random-position sampling."""

from tablestats.sources.csv.reader import DelimitedReader, csv_reader, tsv_reader
from tablestats.sources.csv.sampling import (
    SampleBatch,
    estimate_row_count,
    estimate_row_interval,
    has_bare_quote,
    sample_records,
)

__all__ = [
    "DelimitedReader",
    "SampleBatch",
    "csv_reader",
    "estimate_row_count",
    "estimate_row_interval",
    "has_bare_quote",
    "sample_records",
    "tsv_reader",
]
