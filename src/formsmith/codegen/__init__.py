# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
TSX form generation for @tanstack/react-form.
"""

from __future__ import annotations

from formsmith.codegen.defaults import default_value
from formsmith.codegen.errors import EmissionPreconditionError
from formsmith.codegen.fields import field_markup
from formsmith.codegen.form import infer_type_name
from formsmith.codegen.generator import GenerateResult, generate

__all__ = [
    "generate",
    "GenerateResult",
    "field_markup",
    "default_value",
    "infer_type_name",
    "EmissionPreconditionError",
]
