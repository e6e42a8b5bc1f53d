"""Human-readable rendering of TableStats."""

from __future__ import annotations

import math

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from tablestats.analysis.statistics import TableStats


def format_value(value: float | str | None) -> str:
    """Render a min/max value; whole floats print without decimals."""
    if value is None:
        return "-"
    if isinstance(value, float) and math.isfinite(value) and value == int(value):
        return str(int(value))
    return str(value)


def print_report(stats: TableStats, console: Console) -> None:
    """Print the statistics of one file.

    Args:
        stats: Analysis result, read only
        console: Rich console to print to
    """
    console.print(f"\n[bold]=== {stats.format_name} File Statistics ===[/bold]")
    label = "Sampled Rows" if stats.sampled else "Rows"
    console.print(f"{label}: {stats.row_count}")
    console.print(f"Estimated Total Rows: {stats.estimated_rows}")
    if stats.estimated_rows_interval:
        low, high = stats.estimated_rows_interval
        confidence = stats.sampling_config.confidence
        console.print(f"  {confidence:.0%} interval: {low} - {high}")
    console.print(f"Columns: {stats.column_count}")
    console.print(f"Column Names: {escape(', '.join(stats.column_names))}")

    console.print("\n[bold]Column Details[/bold]")
    table = RichTable(show_header=True, header_style="bold")
    table.add_column("Column")
    table.add_column("Type")
    table.add_column("Nulls", justify="right")
    table.add_column("Min")
    table.add_column("Max")
    for column in stats.columns:
        table.add_row(
            escape(column.name),
            column.column_type.value,
            f"{column.null_count} ({column.null_percentage:.2f}%)",
            escape(format_value(column.min_value)),
            escape(format_value(column.max_value)),
        )
    console.print(table)

    if stats.aggregates:
        console.print("\n[bold]Aggregates[/bold]")
        agg_table = RichTable(show_header=True, header_style="bold")
        for heading in ("Column", "Count", "Sum", "Mean", "Median", "Std Dev", "p25", "p75", "p95", "p99"):
            agg_table.add_column(heading, justify="left" if heading == "Column" else "right")
        for name in stats.column_names:
            agg = stats.aggregates.get(name)
            if agg is None:
                continue
            agg_table.add_row(
                escape(name),
                str(agg.count),
                f"{agg.sum:.2f}",
                f"{agg.mean:.2f}",
                f"{agg.median:.2f}",
                f"{agg.std_dev:.2f}",
                *(f"{agg.percentiles.get(p, 0.0):.2f}" for p in (25, 75, 95, 99)),
            )
        console.print(agg_table)

    if stats.sample_data:
        console.print("\n[bold]Sample Data[/bold]")
        for i, row in enumerate(stats.sample_data, start=1):
            console.print(f"  Row {i}: {row}", markup=False)
    console.print()
