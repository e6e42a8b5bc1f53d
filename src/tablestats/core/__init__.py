"""Core infrastructure: configuration, logging, errors and base models."""

from tablestats.core.config import Settings, get_settings
from tablestats.core.errors import (
    ConfigError,
    EmptyFileError,
    HeaderError,
    TableIOError,
    TableStatsError,
    UnsupportedFormatError,
)
from tablestats.core.models import ColumnType, Result, SamplingConfig, validate_config

__all__ = [
    "ColumnType",
    "ConfigError",
    "EmptyFileError",
    "HeaderError",
    "Result",
    "SamplingConfig",
    "Settings",
    "TableIOError",
    "TableStatsError",
    "UnsupportedFormatError",
    "get_settings",
    "validate_config",
]
