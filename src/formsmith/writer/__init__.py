# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
Zod v4 source generation from form descriptors.
"""

from __future__ import annotations

from formsmith.writer.emitter import emit_field
from formsmith.writer.errors import CircularReferenceError, DuplicateSchemaError
from formsmith.writer.types import EmbeddedSchema, SchemaWriterResult
from formsmith.writer.writer import collect_schema_refs, topological_sort, write_schema

__all__ = [
    "write_schema",
    "emit_field",
    "collect_schema_refs",
    "topological_sort",
    "EmbeddedSchema",
    "SchemaWriterResult",
    "CircularReferenceError",
    "DuplicateSchemaError",
]
