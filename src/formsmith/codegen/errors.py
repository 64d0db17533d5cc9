# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Error classes for form code generation.
"""

from __future__ import annotations

from typing import Any, Final

from formsmith.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormsmithError

CODEGEN = ErrorCategory.get_or_create("CODEGEN")
CODEGEN_EMPTY_OPTIONS: Final = ErrorCode.get_or_create("CODEGEN_EMPTY_OPTIONS", CODEGEN)


class EmissionPreconditionError(FormsmithError):
    """Raised when a control cannot be emitted from its config.

    A choice control with no options is the case that matters: its markup
    would offer nothing to pick.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = CODEGEN_EMPTY_OPTIONS,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            severity=ErrorSeverity.ERROR,
            **kwargs,
        )
