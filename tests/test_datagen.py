"""Tests for the synthetic data generator."""

import csv
import random

from tablestats.core.models import ColumnType
from tablestats.datagen import DEPARTMENTS, HEADER, generate_row, read_preview, write_csv
from tablestats.sources import csv_reader


class TestGenerateRow:
    """Tests for generate_row."""

    def test_shape(self):
        row = generate_row(7, random.Random(1))
        assert len(row) == len(HEADER)
        assert row[0] == "7"
        assert row[5] in DEPARTMENTS
        assert row[7] in {"true", "false"}

    def test_value_ranges(self):
        rng = random.Random(2)
        for i in range(200):
            row = generate_row(i, rng)
            assert 22 <= int(row[3]) <= 65
            assert 30_000 <= int(row[4]) < 150_000
            assert 0.0 <= float(row[8]) <= 100.0
            assert "@" in row[2]


class TestWriteCsv:
    """Tests for write_csv."""

    def test_writes_header_and_rows(self, tmp_path):
        path = write_csv(tmp_path / "out.csv", 50, seed=1)

        with path.open(newline="") as f:
            rows = list(csv.reader(f))

        assert rows[0] == HEADER
        assert len(rows) == 51
        assert rows[-1][0] == "50"

    def test_seed_reproducible(self, tmp_path):
        a = write_csv(tmp_path / "a.csv", 20, seed=5)
        b = write_csv(tmp_path / "b.csv", 20, seed=5)
        assert a.read_bytes() == b.read_bytes()

    def test_tab_delimiter(self, tmp_path):
        path = write_csv(tmp_path / "out.tsv", 3, seed=1, delimiter="\t")
        assert path.read_text().splitlines()[0] == "\t".join(HEADER)

    def test_progress_every_ten_thousand(self, tmp_path):
        seen = []
        write_csv(tmp_path / "out.csv", 25_000, seed=1, progress=seen.append)
        assert seen == [10_000, 20_000]

    def test_output_analyzes(self, tmp_path, full_scan_config):
        path = write_csv(tmp_path / "emp.csv", 100, seed=3)

        stats = csv_reader().read_table(path, full_scan_config)

        assert stats.row_count == 100
        assert stats.column_names == HEADER
        assert stats.column_types["id"] == ColumnType.INT64
        assert stats.column_types["score"] == ColumnType.FLOAT64
        assert stats.column_types["join_date"] == ColumnType.STRING
        assert stats.column_types["active"] == ColumnType.STRING
        assert stats.aggregates["id"].sum == 5050.0


class TestReadPreview:
    """Tests for read_preview."""

    def test_header_and_first_rows(self, tmp_path):
        path = write_csv(tmp_path / "out.csv", 10, seed=1)

        preview = read_preview(path)

        assert len(preview) == 5
        assert preview[0] == HEADER
        assert [row[0] for row in preview[1:]] == ["1", "2", "3", "4"]

    def test_short_file(self, tmp_path):
        path = write_csv(tmp_path / "out.tsv", 1, seed=1, delimiter="\t")
        preview = read_preview(path, delimiter="\t", count=5)
        assert len(preview) == 2
        assert preview[0] == HEADER
