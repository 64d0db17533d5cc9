# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Error classes for field-to-component mapping.
"""

from __future__ import annotations

from typing import Any, Final

from formsmith.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormsmithError

MAPPING = ErrorCategory.get_or_create("MAPPING")
MAPPING_UNMAPPED_FIELD: Final = ErrorCode.get_or_create("MAPPING_UNMAPPED_FIELD", MAPPING)


class UnmappedComponentError(FormsmithError):
    """Raised when no mapping rule matches a field."""

    def __init__(self, field_name: str, field_type: str, **kwargs: Any) -> None:
        super().__init__(
            message=(
                f'No mapping rule matched field "{field_name}" of type "{field_type}"'
            ),
            code=MAPPING_UNMAPPED_FIELD,
            severity=ErrorSeverity.ERROR,
            field_name=field_name,
            field_type=field_type,
            **kwargs,
        )
        self.field_name = field_name
        self.field_type = field_type
