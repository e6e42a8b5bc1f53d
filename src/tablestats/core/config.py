"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tablestats.core.models import SamplingConfig

MIB = 1024 * 1024


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: TABLESTATS_
    """

    model_config = SettingsConfigDict(
        env_prefix="TABLESTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Sampling
    sample_size: int = Field(
        default=1000,
        description="Number of rows to sample from large files",
    )
    random_positions: int = Field(
        default=5,
        description="Number of random byte offsets to read records from",
    )
    confidence: float = Field(
        default=0.95,
        description="Confidence level for the estimated row count interval",
    )
    max_file_size: int = Field(
        default=100 * MIB,
        description="Files up to this many bytes are read entirely",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'

    def sampling_config(self) -> SamplingConfig:
        """Build the sampling configuration from these settings."""
        return SamplingConfig(
            sample_size=self.sample_size,
            random_positions=self.random_positions,
            confidence=self.confidence,
            max_file_size=self.max_file_size,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
