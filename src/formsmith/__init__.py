# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
formsmith: typed form components and Zod schemas from schema definitions.

Build a schema with ``z`` (or read one from Zod source with ``load_schema``),
then ``generate`` a React form for it or ``write_schema`` it back out as
Zod v4 source.
"""

from __future__ import annotations

from formsmith.codegen import (
    EmissionPreconditionError,
    GenerateResult,
    generate,
    infer_type_name,
)
from formsmith.config import GeneratorSettings, get_settings
from formsmith.errors import FormsmithError
from formsmith.introspection import (
    FieldDescriptor,
    FormDescriptor,
    FormStep,
    StructuralError,
    extract_constraints,
    introspect,
    unwrap_schema,
)
from formsmith.mapping import (
    ComponentConfig,
    MappingRegistry,
    MappingRule,
    UnmappedComponentError,
    resolve_field,
)
from formsmith.schema import SchemaSourceError, load_schema, load_schema_source, z
from formsmith.writer import (
    CircularReferenceError,
    EmbeddedSchema,
    SchemaWriterResult,
    emit_field,
    write_schema,
)

__all__ = [
    # Schema
    "z",
    "load_schema",
    "load_schema_source",
    # Pipeline
    "introspect",
    "unwrap_schema",
    "extract_constraints",
    "resolve_field",
    "generate",
    "write_schema",
    "emit_field",
    "infer_type_name",
    # Types
    "ComponentConfig",
    "EmbeddedSchema",
    "FieldDescriptor",
    "FormDescriptor",
    "FormStep",
    "GenerateResult",
    "MappingRegistry",
    "MappingRule",
    "SchemaWriterResult",
    # Configuration
    "GeneratorSettings",
    "get_settings",
    # Errors
    "FormsmithError",
    "StructuralError",
    "UnmappedComponentError",
    "EmissionPreconditionError",
    "CircularReferenceError",
    "SchemaSourceError",
]
