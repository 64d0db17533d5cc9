# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Configuration-specific error classes for formsmith.
"""

from __future__ import annotations

from typing import Any, Final

from formsmith.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormsmithError

CONFIG = ErrorCategory.get_or_create("CONFIG")
CONFIG_ERROR: Final = ErrorCode.get_or_create("CONFIG_ERROR", CONFIG)


class ConfigError(FormsmithError):
    """Raised when configuration cannot be resolved."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = CONFIG_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )
