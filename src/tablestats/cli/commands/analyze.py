"""Analyze command - print statistics for one file."""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from tablestats.cli.common import JsonFlag, SeedOption, VerboseOption, console, setup_logging
from tablestats.core.config import get_settings
from tablestats.core.errors import TableStatsError
from tablestats.core.logging import get_logger
from tablestats.core.models import SamplingConfig
from tablestats.generator import StatisticsGenerator
from tablestats.report import print_report
from tablestats.sources import reader_for_path

logger = get_logger(__name__)


def analyze(
    file: Annotated[
        Path,
        typer.Argument(help="Input file (CSV or TSV)"),
    ],
    sample_size: Annotated[
        int | None,
        typer.Option("--sample-size", "-s", help="Number of rows to sample"),
    ] = None,
    positions: Annotated[
        int | None,
        typer.Option("--positions", "-p", help="Number of random positions"),
    ] = None,
    confidence: Annotated[
        float | None,
        typer.Option("--confidence", "-c", help="Confidence level (0-1)"),
    ] = None,
    max_size: Annotated[
        int | None,
        typer.Option("--max-size", "-m", help="Max file size for full processing (bytes)"),
    ] = None,
    seed: SeedOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Analyze a CSV or TSV file.

    Files larger than --max-size are sampled at random positions and
    their total row count is estimated.

    Examples:

        tablestats analyze data.csv

        tablestats analyze large.tsv -s 5000 -p 10
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Error: invalid TABLESTATS_ settings: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    setup_logging(verbose, settings.log_format)

    defaults = settings.sampling_config()
    config = SamplingConfig(
        sample_size=defaults.sample_size if sample_size is None else sample_size,
        random_positions=defaults.random_positions if positions is None else positions,
        confidence=defaults.confidence if confidence is None else confidence,
        max_file_size=defaults.max_file_size if max_size is None else max_size,
    )

    try:
        reader = reader_for_path(file, rng=random.Random(seed) if seed is not None else None)
        generator = StatisticsGenerator(reader, config)
    except TableStatsError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    start_time = time.time()
    result = generator.generate_stats(file)
    if not result.success:
        console.print(f"[red]Error processing file: {escape(result.error or '')}[/red]")
        raise typer.Exit(1)

    logger.info("process_time", seconds=round(time.time() - start_time, 3))

    stats = result.unwrap()
    if json_output:
        typer.echo(stats.model_dump_json(indent=2))
    else:
        print_report(stats, console)
