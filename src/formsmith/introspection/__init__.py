# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
Schema introspection: schema nodes in, field descriptors out.
"""

from __future__ import annotations

from formsmith.introspection.checks import extract_constraints
from formsmith.introspection.errors import StructuralError
from formsmith.introspection.introspect import introspect
from formsmith.introspection.labels import format_option_label, name_to_label
from formsmith.introspection.types import (
    COMPOSITE_TYPES,
    SCALAR_TYPES,
    ArrayMetadata,
    BooleanMetadata,
    DateMetadata,
    EnumMetadata,
    FieldConstraints,
    FieldDescriptor,
    FieldMetadata,
    FieldType,
    FormDescriptor,
    FormStep,
    NumberMetadata,
    ObjectMetadata,
    RecordMetadata,
    StringMetadata,
    TupleMetadata,
    UnionMetadata,
    UnionVariant,
)
from formsmith.introspection.unwrap import UnwrapResult, unwrap_schema

__all__ = [
    # Operations
    "extract_constraints",
    "introspect",
    "unwrap_schema",
    "UnwrapResult",
    # Labels
    "format_option_label",
    "name_to_label",
    # Descriptor types
    "COMPOSITE_TYPES",
    "SCALAR_TYPES",
    "FieldConstraints",
    "FieldDescriptor",
    "FieldMetadata",
    "FieldType",
    "FormDescriptor",
    "FormStep",
    # Metadata variants
    "ArrayMetadata",
    "BooleanMetadata",
    "DateMetadata",
    "EnumMetadata",
    "NumberMetadata",
    "ObjectMetadata",
    "RecordMetadata",
    "StringMetadata",
    "TupleMetadata",
    "UnionMetadata",
    "UnionVariant",
    # Errors
    "StructuralError",
]
