# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Log levels accepted by ``FORMSMITH_LOGGING_LEVEL`` and ``get_logger``."""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def parse(cls, value: str | LogLevel) -> LogLevel:
        """Look up a level by name, ignoring case.

        Raises:
            ValueError: If ``value`` names no level
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None
