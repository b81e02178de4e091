"""Centralized configuration for minspan using Pydantic Settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration loaded from ``MINSPAN_*`` environment variables.

    Command-line flags take precedence over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="MINSPAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore unrelated MINSPAN_* variables
    )

    # Logging
    log_level: str = Field(default="warning", description="Root logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs on stderr")

    # Ranking
    result_limit: int = Field(default=10, ge=1, description="Maximum number of ranked lines printed")
    unique_candidates: bool = Field(default=True, description="Drop repeated candidate lines before ranking")
    show_spans: bool = Field(default=False, description="Prefix each printed line with its start:end span")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized.lower()
