# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Logger implementation for formsmith.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
The compiler pipeline is synchronous, so every logging call is synchronous.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from formsmith.logging.config import LoggingSettings
from formsmith.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with structured data.

        Args:
            record: The log record to format

        Returns:
            Formatted log string
        """
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        }

        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        return self._format_text(message, extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {"message": record.getMessage(), **extra}
        log_data["name"] = record.name

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["error"] = str(record.exc_info[1])

        return json.dumps(log_data, default=_json_default)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message

        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output.

        Args:
            value: Value to format

        Returns:
            Formatted value string
        """
        if isinstance(value, str):
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, datetime.datetime | datetime.date):
            return value.isoformat()
        if isinstance(value, enum.Enum):
            return str(value.value)
        try:
            return json.dumps(value, default=_json_default)
        except (TypeError, ValueError):
            return str(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (datetime.datetime, datetime.date)):
        return obj.isoformat()
    if isinstance(obj, enum.Enum):
        return obj.value
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    return str(obj)


class FormsmithLogger:
    """Default logger implementation for formsmith."""

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        configure: bool = True,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            settings: Optional logger settings (loads from environment if None)
            configure: Whether to reset the level and handlers of the
                underlying standard library logger
        """
        self.name = name
        self._settings = settings or LoggingSettings()
        self._logger = logging.getLogger(name)
        if configure:
            self._configure()
        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

    def _configure(self) -> None:
        self._logger.setLevel(self._settings.level.stdlib_level)

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stderr)
            console.setFormatter(formatter)
            console.setLevel(logging.NOTSET)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    @property
    def handlers(self) -> list[logging.Handler]:
        """Handlers attached to the underlying standard library logger."""
        return self._logger.handlers

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        combined_context = {**self._bound_context, **self._context, **kwargs}
        exc_info = combined_context.pop("exc_info", None)
        extra = {
            (f"ctx_{key}" if key in _RESERVED_ATTRS else key): value
            for key, value in combined_context.items()
        }
        self._logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""
        self._log(logging.CRITICAL, message, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logger's level.

        Args:
            level: New logging level
        """
        self._logger.setLevel(level.stdlib_level)

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> FormsmithLogger:
        """Create a new logger with bound context values.

        Args:
            **kwargs: Context values to bind

        Returns:
            New logger instance with bound context
        """
        # Shares the stdlib logger, so its level and handlers are left as they are
        logger = FormsmithLogger(self.name, settings=self._settings, configure=False)
        logger._bound_context = {**self._bound_context, **kwargs}
        return logger


def get_logger(name: str, level: LogLevel | None = None) -> FormsmithLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override

    Returns:
        Configured logger instance
    """
    settings = LoggingSettings()
    logger = FormsmithLogger(name, settings=settings)

    if level is not None:
        logger.set_level(level)

    return logger
