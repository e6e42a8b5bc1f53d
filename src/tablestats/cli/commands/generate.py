"""Generate command - write a synthetic CSV for testing the sampler."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Annotated

import typer

from tablestats.cli.common import SeedOption, console
from tablestats.datagen import read_preview, write_csv


def generate(
    output: Annotated[
        Path,
        typer.Argument(help="Output filename"),
    ] = Path("big_data.csv"),
    rows: Annotated[
        int,
        typer.Option("--rows", "-r", min=0, help="Number of rows to generate"),
    ] = 1_000_000,
    seed: SeedOption = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress progress output"),
    ] = False,
) -> None:
    """Generate a synthetic employee CSV.

    Examples:

        tablestats generate big_data.csv --rows 1000000
    """
    delimiter = "\t" if output.suffix.lower() == ".tsv" else ","

    def report_progress(written: int) -> None:
        if not quiet and rows:
            console.print(f"Progress: {written * 100 // rows}% ({written}/{rows} rows)")

    start_time = time.time()
    try:
        write_csv(output, rows, seed=seed, delimiter=delimiter, progress=report_progress)
    except OSError as e:
        console.print(f"[red]Error generating CSV: {e}[/red]")
        raise typer.Exit(1) from e
    duration = time.time() - start_time

    size_mb = output.stat().st_size / 1024 / 1024
    console.print("\n[green]CSV generation complete[/green]")
    console.print(f"File: {output}")
    console.print(f"Rows: {rows} (plus header)")
    console.print(f"Size: {size_mb:.2f} MB")
    console.print(f"Time: {duration:.2f}s")
    if duration > 0:
        console.print(f"Speed: {rows / duration:.0f} rows/second")

    console.print("\nSample data:")
    for record in read_preview(output, delimiter):
        console.print(str(record), markup=False)
