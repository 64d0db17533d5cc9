# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Error classes for schema construction and schema source loading.
"""

from __future__ import annotations

from typing import Any, Final

from formsmith.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormsmithError

SCHEMA = ErrorCategory.get_or_create("SCHEMA")
SCHEMA_SOURCE_ERROR: Final = ErrorCode.get_or_create("SCHEMA_SOURCE_ERROR", SCHEMA)
SCHEMA_EXPORT_NOT_FOUND: Final = ErrorCode.get_or_create(
    "SCHEMA_EXPORT_NOT_FOUND", SCHEMA
)


class SchemaSourceError(FormsmithError):
    """Raised when schema source text cannot be read."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = SCHEMA_SOURCE_ERROR,
        line: int | None = None,
        column: int | None = None,
        **kwargs: Any,
    ) -> None:
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(
            message=message,
            code=code,
            severity=ErrorSeverity.ERROR,
            line=line,
            column=column,
            **kwargs,
        )
        self.line = line
        self.column = column
