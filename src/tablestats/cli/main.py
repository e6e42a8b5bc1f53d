"""Main CLI application entry point."""

from __future__ import annotations

import typer

from tablestats.cli.commands import analyze, generate

app = typer.Typer(
    name="tablestats",
    help="Statistics for CSV/TSV files, sampled when the file is large.",
    no_args_is_help=True,
)

# Register commands
app.command()(analyze.analyze)
app.command()(generate.generate)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
