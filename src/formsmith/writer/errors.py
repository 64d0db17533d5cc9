# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Error classes for the Zod schema writer.
"""

from __future__ import annotations

from typing import Any, Final

from formsmith.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormsmithError

WRITER = ErrorCategory.get_or_create("WRITER")
WRITER_CIRCULAR_REFERENCE: Final = ErrorCode.get_or_create(
    "WRITER_CIRCULAR_REFERENCE", WRITER
)
WRITER_DUPLICATE_SCHEMA: Final = ErrorCode.get_or_create("WRITER_DUPLICATE_SCHEMA", WRITER)


class CircularReferenceError(FormsmithError):
    """Raised when embedded schemas reference each other in a cycle."""

    def __init__(self, schemas: list[str] | None = None, **kwargs: Any) -> None:
        super().__init__(
            message=(
                "Circular reference detected among embedded schemas. "
                "All schema references must form a directed acyclic graph."
            ),
            code=WRITER_CIRCULAR_REFERENCE,
            severity=ErrorSeverity.ERROR,
            schemas=schemas or [],
            **kwargs,
        )


class DuplicateSchemaError(FormsmithError):
    """Raised when two schemas in one module share an export name."""

    def __init__(self, names: list[str], **kwargs: Any) -> None:
        super().__init__(
            message=f"Duplicate schema export names: {', '.join(names)}",
            code=WRITER_DUPLICATE_SCHEMA,
            severity=ErrorSeverity.ERROR,
            names=names,
            **kwargs,
        )
