"""Shared pytest fixtures for all tests."""

import random
from collections.abc import Callable
from pathlib import Path

import pytest

from tablestats.core.models import SamplingConfig

# Large enough that every fixture file is read entirely
FULL_SCAN = SamplingConfig(max_file_size=1 << 40)


@pytest.fixture
def write_table(tmp_path: Path) -> Callable[..., Path]:
    """Write text content to a file in tmp_path and return its path."""

    def _write(content: str, name: str = "test.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def full_scan_config() -> SamplingConfig:
    """Config that never samples."""
    return FULL_SCAN


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic sampling."""
    return random.Random(42)


@pytest.fixture
def large_csv(tmp_path: Path) -> Path:
    """A 20,000 row CSV with uniformly sized rows.

    Columns: id (int), name (str), value (float), category (str).
    """
    path = tmp_path / "large.csv"
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write("id,name,value,category\n")
        for i in range(1, 20_001):
            f.write(f"{i:06d},name_{i:06d},{i * 1.5:012.2f},cat_{i % 5}\n")
    return path
