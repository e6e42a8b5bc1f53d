"""CLI command implementations."""

from tablestats.cli.commands import analyze, generate

__all__ = [
    "analyze",
    "generate",
]
