"""Tests for random-position sampling of large files."""

import io
import random

import pytest

from tablestats.core.models import ColumnType, SamplingConfig
from tablestats.sources.csv import (
    csv_reader,
    estimate_row_count,
    estimate_row_interval,
    has_bare_quote,
    sample_records,
)

# Rows of the large_csv fixture are 38 bytes; its header is 23
ROW_BYTES = 38
LARGE_FILE_SIZE = 23 + 20_000 * ROW_BYTES

SMALL_MAX = SamplingConfig(max_file_size=1000)


class FixedOffsets(random.Random):
    """Random source whose randrange replays a list of offsets."""

    def __init__(self, offsets):
        super().__init__(0)
        self.offsets = list(offsets)
        self.calls = 0

    def randrange(self, start, stop=None, step=1):
        offset = self.offsets[self.calls]
        self.calls += 1
        assert start <= offset < stop
        return offset


class FlakySeek(io.BytesIO):
    """In-memory file whose first seeks fail."""

    def __init__(self, data, failures):
        self.failures = 0
        super().__init__(data)
        self.failures = failures

    def seek(self, pos, whence=0):
        if self.failures:
            self.failures -= 1
            raise OSError("device not ready")
        return super().seek(pos, whence)


SPREAD = [100_000, 200_000, 300_000, 400_000, 500_000]


class TestSampledRead:
    """Tests for reading a file larger than max_file_size."""

    def test_estimate_close_to_actual(self, large_csv):
        stats = csv_reader(rng=FixedOffsets(SPREAD)).read_table(large_csv, SMALL_MAX)

        assert stats.sampled is True
        assert stats.file_size == LARGE_FILE_SIZE
        assert stats.row_count == 1000
        # Each position also consumes the partial line it landed in
        assert 1000 * ROW_BYTES <= stats.bytes_sampled <= 1000 * ROW_BYTES + 5 * ROW_BYTES
        assert 19_900 <= stats.estimated_rows <= 20_000

    def test_sampled_column_types(self, large_csv):
        stats = csv_reader(rng=FixedOffsets(SPREAD)).read_table(large_csv, SMALL_MAX)

        assert stats.column_names == ["id", "name", "value", "category"]
        assert stats.column_types == {
            "id": ColumnType.INT64,
            "name": ColumnType.STRING,
            "value": ColumnType.FLOAT64,
            "category": ColumnType.STRING,
        }
        assert stats.null_counts["id"] == 0
        assert len(stats.sample_data) == 5

    def test_sampled_rows_are_whole_records(self, large_csv):
        stats = csv_reader(rng=FixedOffsets(SPREAD)).read_table(large_csv, SMALL_MAX)
        for row in stats.sample_data:
            assert len(row) == 4
            assert row[1] == f"name_{row[0]}"

    def test_interval_brackets_estimate(self, large_csv):
        stats = csv_reader(rng=FixedOffsets(SPREAD)).read_table(large_csv, SMALL_MAX)

        low, high = stats.estimated_rows_interval
        assert low <= stats.estimated_rows <= high
        assert high <= stats.file_size

    def test_stops_once_sample_size_reached(self, large_csv):
        rng = FixedOffsets(SPREAD)
        config = SamplingConfig(sample_size=2, random_positions=5, max_file_size=1000)

        stats = csv_reader(rng=rng).read_table(large_csv, config)

        assert stats.row_count == 2
        assert rng.calls == 2

    def test_seeded_rng_is_reproducible(self, large_csv):
        first = csv_reader(rng=random.Random(3)).read_table(large_csv, SMALL_MAX)
        second = csv_reader(rng=random.Random(3)).read_table(large_csv, SMALL_MAX)

        assert first.estimated_rows == second.estimated_rows
        assert first.sample_data == second.sample_data

    def test_header_never_sampled(self, large_csv, rng):
        stats = csv_reader(rng=rng).read_table(large_csv, SMALL_MAX)
        assert ["id", "name", "value", "category"] not in stats.sample_data


class TestSampleRecords:
    """Tests for sample_records on in-memory handles."""

    DATA = b"h1,h2\n" + b"".join(b"%04d,xx\n" % i for i in range(100))

    def test_records_per_position(self):
        config = SamplingConfig(sample_size=10, random_positions=2)

        batch = sample_records(io.BytesIO(self.DATA), len(self.DATA), config, ",", FixedOffsets([50, 400]))

        assert len(batch.records) == 10
        assert [r for _, r in batch.positions] == [5, 5]
        assert batch.bytes_consumed == sum(b for b, _ in batch.positions)

    def test_position_near_end_yields_nothing(self):
        config = SamplingConfig(sample_size=10, random_positions=2)
        size = len(self.DATA)

        batch = sample_records(io.BytesIO(self.DATA), size, config, ",", FixedOffsets([size - 2, 50]))

        assert batch.positions[0] == (2, 0)
        assert len(batch.records) == 5

    def test_failed_seek_skips_position(self):
        config = SamplingConfig(sample_size=10, random_positions=3)
        handle = FlakySeek(self.DATA, failures=1)

        batch = sample_records(handle, len(self.DATA), config, ",", FixedOffsets([50, 100, 400]))

        assert batch.positions_skipped == 1
        assert len(batch.positions) == 2
        assert len(batch.records) == 6

    def test_all_positions_fail(self):
        config = SamplingConfig(sample_size=10, random_positions=2)
        handle = FlakySeek(self.DATA, failures=2)

        batch = sample_records(handle, len(self.DATA), config, ",", FixedOffsets([50, 400]))

        assert batch.records == []
        assert batch.bytes_consumed == 0
        assert batch.positions_skipped == 2

    def test_at_least_one_record_per_position(self):
        config = SamplingConfig(sample_size=3, random_positions=10)

        batch = sample_records(
            io.BytesIO(self.DATA), len(self.DATA), config, ",", FixedOffsets(range(50, 550, 50))
        )

        assert len(batch.records) == 3
        assert all(r == 1 for _, r in batch.positions)


class TestEstimateRowCount:
    """Tests for the row count extrapolation."""

    def test_uniform_rows(self):
        config = SamplingConfig(sample_size=1000)
        assert estimate_row_count(1_000_000, 50_000, config) == 20_000

    def test_nothing_consumed(self):
        assert estimate_row_count(1_000_000, 0, SamplingConfig()) == 0

    def test_truncates(self):
        config = SamplingConfig(sample_size=3)
        # 10 bytes per record, 105 / 10 = 10.5
        assert estimate_row_count(105, 30, config) == 10


class TestEstimateRowInterval:
    """Tests for the confidence interval of the row count."""

    POSITIONS = [(3800, 100), (3900, 100), (3700, 100), (3850, 100)]

    def test_brackets_point_estimate(self):
        low, high = estimate_row_interval(380_000, self.POSITIONS, 0.95)
        assert low < 10_000 < high

    def test_higher_confidence_is_wider(self):
        low95, high95 = estimate_row_interval(380_000, self.POSITIONS, 0.95)
        low99, high99 = estimate_row_interval(380_000, self.POSITIONS, 0.99)
        assert low99 < low95
        assert high99 > high95

    def test_identical_positions_collapse(self):
        low, high = estimate_row_interval(3800, [(380, 10), (380, 10)], 0.9)
        assert low == high == 100

    @pytest.mark.parametrize(
        "positions",
        [[], [(3800, 100)], [(3800, 100), (50, 0)]],
    )
    def test_too_few_positions(self, positions):
        assert estimate_row_interval(380_000, positions, 0.95) is None

    def test_capped_at_file_size(self):
        _, high = estimate_row_interval(100, [(1, 1), (200, 1)], 0.99)
        assert high <= 100


def multiline_table(rows: int) -> str:
    """Records whose quoted note field spans two lines."""
    body = "".join(f'{i},"line one\nline two, {i}"\n' for i in range(1, rows + 1))
    return "id,note\n" + body


class TestMultilineFields:
    """Tests for sampling files whose quoted fields span lines."""

    def test_offset_inside_quoted_field(self, write_table):
        content = multiline_table(3000)
        path = write_table(content)
        # Land inside the first line of each chosen record
        offsets = [content.index(f'\n{k},"line one') + 8 for k in (500, 1200, 2000)]
        config = SamplingConfig(sample_size=30, random_positions=3, max_file_size=1000)

        stats = csv_reader(rng=FixedOffsets(offsets)).read_table(path, config)

        assert stats.row_count == 30
        assert stats.column_types["id"] == ColumnType.INT64
        assert stats.column_types["note"] == ColumnType.STRING
        for row in stats.sample_data:
            assert row[1] == f"line one\nline two, {row[0]}"

    def test_random_offsets_keep_numeric_id(self, write_table):
        path = write_table(multiline_table(3000))
        config = SamplingConfig(sample_size=200, random_positions=10, max_file_size=1000)

        stats = csv_reader(rng=random.Random(7)).read_table(path, config)

        assert stats.column_types["id"] == ColumnType.INT64
        assert all(row[1].startswith("line one\n") for row in stats.sample_data)


class TestHasBareQuote:
    """Tests for bare quote detection on raw record text."""

    @pytest.mark.parametrize(
        "raw",
        [
            "1,2\n",
            '1,"a, b"\n',
            '1,"say ""hi"""\n',
            '"line one\nline two"\n',
            "",
        ],
    )
    def test_well_formed(self, raw):
        assert not has_bare_quote(raw, ",")

    @pytest.mark.parametrize(
        "raw",
        [
            'line two, 5"\n',
            '1,x"y\n',
            '1, "a"\n',
        ],
    )
    def test_bare_quote(self, raw):
        assert has_bare_quote(raw, ",")

    def test_tab_delimiter(self):
        assert not has_bare_quote('1\t"a\tb"\n', "\t")
        assert has_bare_quote('1\ta"b\n', "\t")
