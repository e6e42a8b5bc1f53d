"""Statistical Profile Models.

Pydantic models for the result of one file analysis:
- AggregateStats: Aggregations over the numeric values of a column
- ColumnStats: Everything the column analyzer learned about one column
- TableStats: The whole file, keyed by column name
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tablestats.core.models import ColumnType, SamplingConfig

PERCENTILE_RANKS: tuple[int, ...] = (25, 50, 75, 90, 95, 99)

SAMPLE_PREVIEW_ROWS = 5


class AggregateStats(BaseModel):
    """Statistics for numeric columns."""

    model_config = ConfigDict(frozen=True)

    count: int = 0
    sum: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    std_dev: float = 0.0
    variance: float = 0.0  # Population variance
    percentiles: dict[int, float] = Field(default_factory=dict)


class ColumnStats(BaseModel):
    """Statistics for a single column."""

    model_config = ConfigDict(frozen=True)

    name: str
    column_type: ColumnType
    null_count: int
    null_percentage: float
    min_value: float | str | None = None
    max_value: float | str | None = None
    aggregates: AggregateStats | None = None


class TableStats(BaseModel):
    """Statistics of one delimited file.

    row_count is the number of rows actually examined; estimated_rows is the
    extrapolated population size and equals row_count when the file was read
    entirely.
    """

    model_config = ConfigDict(frozen=True)

    format_name: str
    file_size: int
    row_count: int
    estimated_rows: int
    column_count: int
    column_names: list[str]
    column_types: dict[str, ColumnType] = Field(default_factory=dict)
    null_counts: dict[str, int] = Field(default_factory=dict)
    null_percentage: dict[str, float] = Field(default_factory=dict)
    min_values: dict[str, float | str] = Field(default_factory=dict)
    max_values: dict[str, float | str] = Field(default_factory=dict)
    aggregates: dict[str, AggregateStats] = Field(default_factory=dict)
    sample_data: list[list[str]] = Field(default_factory=list)
    sampling_config: SamplingConfig
    sampled: bool = False
    bytes_sampled: int = 0
    estimated_rows_interval: tuple[int, int] | None = None

    @classmethod
    def from_columns(
        cls,
        columns: list[ColumnStats],
        records: list[list[str]],
        **fields: object,
    ) -> TableStats:
        """Assemble TableStats from per-column results.

        Columns are expected in header order.
        """
        return cls(
            column_count=len(columns),
            column_names=[c.name for c in columns],
            column_types={c.name: c.column_type for c in columns},
            null_counts={c.name: c.null_count for c in columns},
            null_percentage={c.name: c.null_percentage for c in columns},
            min_values={c.name: c.min_value for c in columns if c.min_value is not None},
            max_values={c.name: c.max_value for c in columns if c.max_value is not None},
            aggregates={c.name: c.aggregates for c in columns if c.aggregates is not None},
            sample_data=[list(r) for r in records[:SAMPLE_PREVIEW_ROWS]],
            **fields,
        )

    @property
    def columns(self) -> list[ColumnStats]:
        """Per-column view in header order."""
        return [
            ColumnStats(
                name=name,
                column_type=self.column_types.get(name, ColumnType.STRING),
                null_count=self.null_counts.get(name, 0),
                null_percentage=self.null_percentage.get(name, 0.0),
                min_value=self.min_values.get(name),
                max_value=self.max_values.get(name),
                aggregates=self.aggregates.get(name),
            )
            for name in self.column_names
        ]
