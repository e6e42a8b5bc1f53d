"""Tests for extension-based reader selection."""

import pytest

from tablestats.core.errors import UnsupportedFormatError
from tablestats.sources import (
    DelimitedReader,
    ParquetReader,
    reader_for_path,
    supported_extensions,
)


class TestReaderForPath:
    """Tests for reader_for_path."""

    def test_csv(self):
        reader = reader_for_path("data.csv")
        assert isinstance(reader, DelimitedReader)
        assert reader.delimiter == ","
        assert reader.format_name == "CSV"

    def test_tsv(self):
        reader = reader_for_path("data.tsv")
        assert reader.delimiter == "\t"
        assert reader.format_name == "TSV"

    def test_extension_case_insensitive(self):
        assert reader_for_path("DATA.CSV").format_name == "CSV"
        assert reader_for_path("x/y/Report.Tsv").format_name == "TSV"

    def test_parquet_recognised(self):
        assert isinstance(reader_for_path("table.parquet"), ParquetReader)

    @pytest.mark.parametrize("path", ["data.txt", "data.json", "README"])
    def test_unsupported(self, path):
        with pytest.raises(UnsupportedFormatError, match="unsupported file type"):
            reader_for_path(path)

    def test_rng_passed_through(self, rng):
        reader = reader_for_path("data.csv", rng=rng)
        assert reader.rng is rng

    def test_supported_extensions(self):
        assert supported_extensions() == [".csv", ".parquet", ".tsv"]

    def test_error_lists_supported_extensions(self):
        with pytest.raises(UnsupportedFormatError, match=r"\(supported: \.csv, \.parquet, \.tsv\)"):
            reader_for_path("data.xlsx")
