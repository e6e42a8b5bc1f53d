"""Tests for the column analyzer."""

import pytest

from tablestats.analysis.statistics import analyze_column, analyze_columns
from tablestats.core.models import ColumnType

PEOPLE = [
    ["John", "25", "NYC"],
    ["Jane", "", "Boston"],
    ["Bob", "35", ""],
    ["Alice", "null", "Chicago"],
]


class TestAnalyzeColumn:
    """Tests for analyze_column."""

    def test_null_counts_and_percentage(self):
        age = analyze_column(PEOPLE, 1, "age")
        city = analyze_column(PEOPLE, 2, "city")

        assert age.null_count == 2
        assert age.null_percentage == 50.0
        assert city.null_count == 1
        assert city.null_percentage == 25.0

    def test_numeric_column_gets_aggregates(self):
        age = analyze_column(PEOPLE, 1, "age")

        assert age.column_type == ColumnType.INT64
        assert age.min_value == 25.0
        assert age.max_value == 35.0
        assert age.aggregates is not None
        assert age.aggregates.count == 2
        assert age.aggregates.mean == 30.0

    def test_string_column_has_no_aggregates(self):
        name = analyze_column(PEOPLE, 0, "name")

        assert name.column_type == ColumnType.STRING
        assert name.aggregates is None
        assert name.min_value == "Alice"
        assert name.max_value == "John"

    def test_float_column(self):
        records = [["1.5"], ["2"], ["3.25"]]
        price = analyze_column(records, 0, "price")

        assert price.column_type == ColumnType.FLOAT64
        assert price.aggregates.sum == pytest.approx(6.75)

    def test_short_records_count_as_null(self):
        records = [["a", "1"], ["b"], ["c", "3"]]
        col = analyze_column(records, 1, "n")

        assert col.null_count == 1
        assert col.null_percentage == pytest.approx(100 / 3)
        assert col.aggregates.count == 2

    def test_all_null_column(self):
        records = [["x", ""], ["y", "NULL"], ["z"]]
        col = analyze_column(records, 1, "empty")

        assert col.null_percentage == 100.0
        assert col.min_value is None
        assert col.max_value is None
        assert col.aggregates is None

    def test_type_widening_mid_column(self):
        records = [["1"], ["2"], ["n/a"], ["4"]]
        col = analyze_column(records, 0, "mixed")

        assert col.column_type == ColumnType.STRING
        assert col.aggregates is None

    def test_no_records(self):
        col = analyze_column([], 0, "a")
        assert col.null_count == 0
        assert col.null_percentage == 0.0


class TestAnalyzeColumns:
    """Tests for analyze_columns."""

    def test_header_order_preserved(self):
        columns = analyze_columns(PEOPLE, ["name", "age", "city"])
        assert [c.name for c in columns] == ["name", "age", "city"]
        assert [c.column_type for c in columns] == [
            ColumnType.STRING,
            ColumnType.INT64,
            ColumnType.STRING,
        ]
