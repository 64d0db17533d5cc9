# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Error classes for schema introspection.
"""

from __future__ import annotations

from typing import Any, Final

from formsmith.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormsmithError

INTROSPECTION = ErrorCategory.get_or_create("INTROSPECTION")
SCHEMA_STRUCTURE_ERROR: Final = ErrorCode.get_or_create(
    "SCHEMA_STRUCTURE_ERROR", INTROSPECTION
)
SCHEMA_UNKNOWN_STEP_FIELD: Final = ErrorCode.get_or_create(
    "SCHEMA_UNKNOWN_STEP_FIELD", INTROSPECTION
)


class StructuralError(FormsmithError):
    """Raised when a schema does not have the shape the introspector requires.

    Covers a non-object root, a value that is not a schema node and a wrapper
    node that cannot be unwrapped. Always fatal.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = SCHEMA_STRUCTURE_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            severity=ErrorSeverity.ERROR,
            **kwargs,
        )
