"""Core models shared across modules."""

from tablestats.core.models.base import (
    ColumnType,
    Result,
    SamplingConfig,
    validate_config,
)

__all__ = [
    "ColumnType",
    "Result",
    "SamplingConfig",
    "validate_config",
]
