"""Application settings."""

import hashlib
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_MAX_WORKERS,
    MIN_DIGEST_BITS,
)


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOCALDUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Detection settings
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Bytes compared at the start and end of each file",
    )
    max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS,
        gt=0,
        description="Number of size groups processed in parallel",
    )
    hash_algorithm: str = Field(
        default=DEFAULT_HASH_ALGORITHM,
        description="hashlib algorithm used for full-content confirmation",
    )
    min_file_size: int = Field(
        default=0,
        ge=0,
        description="Minimum file size in bytes to consider",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("hash_algorithm")
    @classmethod
    def _check_hash_algorithm(cls, value: str) -> str:
        name = value.lower()
        if name not in hashlib.algorithms_available:
            raise ValueError(f"unknown hash algorithm: {value}")
        digest = hashlib.new(name)
        if digest.digest_size == 0 or digest.digest_size * 8 < MIN_DIGEST_BITS:
            raise ValueError(
                f"{value} produces digests shorter than {MIN_DIGEST_BITS} bits"
            )
        return name

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid log level: {value}")
        return level


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
