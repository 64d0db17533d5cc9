# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Logging settings, read from ``FORMSMITH_LOGGING_*`` environment variables.

The pipeline logs at debug level, so the default ``INFO`` keeps it quiet
unless ``FORMSMITH_LOGGING_LEVEL=debug`` is set.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from formsmith.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """Where formsmith log records go and how they are formatted."""

    model_config = SettingsConfigDict(
        env_prefix="FORMSMITH_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum level emitted")
    json_format: bool = Field(default=False, description="One JSON object per record")
    include_timestamp: bool = Field(
        default=True, description="Prefix records with a timestamp"
    )
    include_level: bool = Field(default=True, description="Show the level name")
    console_enabled: bool = Field(default=True, description="Write records to stderr")
    file_enabled: bool = Field(
        default=False, description="Also write records to file_path"
    )
    file_path: str | None = Field(
        default=None, description="Log file used when file_enabled"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        if not isinstance(value, str):
            raise ValueError(f"Log level must be a string, got {type(value).__name__}")
        return LogLevel.parse(value)
