"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
component (sources, typing, statistics).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tablestats.core.errors import ConfigError


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this at API boundaries for expected failures.
    Inside the readers, failures are raised as TableStatsError subclasses.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise ValueError(f"Result failed: {self.error}")
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self


# === Enums ===


class ColumnType(str, Enum):
    """Inferred column types."""

    STRING = "string"
    INT64 = "int64"
    FLOAT64 = "float64"

    @property
    def is_numeric(self) -> bool:
        return self is not ColumnType.STRING


# === Configuration ===


class SamplingConfig(BaseModel):
    """Controls the sampling behavior of the readers.

    Immutable once constructed. Call validate_config() before any I/O.
    """

    model_config = ConfigDict(frozen=True)

    sample_size: int = 1000  # Number of rows to sample
    random_positions: int = 5  # Number of random positions to seek to
    confidence: float = 0.95  # Confidence level for the row count interval
    max_file_size: int = 100 * 1024 * 1024  # Max file size to process entirely


def validate_config(config: SamplingConfig) -> None:
    """Reject configurations the sampling reader cannot work with.

    Raises:
        ConfigError: With a message naming the offending setting
    """
    if config.sample_size <= 0:
        raise ConfigError(f"sample size must be positive, got {config.sample_size}")
    if config.random_positions <= 0:
        raise ConfigError(f"random positions must be positive, got {config.random_positions}")
    if not 0 < config.confidence < 1:
        raise ConfigError(f"confidence must be between 0 and 1, got {config.confidence}")
    if config.max_file_size < 0:
        raise ConfigError(f"max file size must not be negative, got {config.max_file_size}")
