"""CLI for tablestats.

Usage:
    tablestats analyze data.csv
    tablestats analyze large.tsv --sample-size 5000 --positions 10
    tablestats analyze data.csv --confidence 0.99 --json
    tablestats generate big_data.csv --rows 1000000

Environment:
    Loads .env file from current directory if present.
    TABLESTATS_* variables set the default sampling options.
"""

from tablestats.cli.main import app, main

__all__ = ["app", "main"]
