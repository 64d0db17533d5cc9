# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
Schema values consumed by the compiler.

``z`` builds schema nodes in Python; ``load_schema_source`` reads them back
from Zod source text.
"""

from __future__ import annotations

from formsmith.schema.builder import SchemaBuilder, z
from formsmith.schema.errors import SchemaSourceError
from formsmith.schema.nodes import (
    STRING_FORMATS,
    AnyNode,
    ArrayNode,
    BigIntNode,
    BooleanNode,
    Check,
    DateNode,
    EnumNode,
    IntersectionNode,
    LiteralNode,
    NullableNode,
    NullNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    PipeNode,
    RecordNode,
    SchemaNode,
    SetNode,
    StringNode,
    TransformNode,
    TupleNode,
    UnionNode,
    UnknownNode,
)
from formsmith.schema.source import load_schema, load_schema_source

__all__ = [
    # Builder
    "SchemaBuilder",
    "z",
    # Nodes
    "STRING_FORMATS",
    "AnyNode",
    "ArrayNode",
    "BigIntNode",
    "BooleanNode",
    "Check",
    "DateNode",
    "EnumNode",
    "IntersectionNode",
    "LiteralNode",
    "NullableNode",
    "NullNode",
    "NumberNode",
    "ObjectNode",
    "OptionalNode",
    "PipeNode",
    "RecordNode",
    "SchemaNode",
    "SetNode",
    "StringNode",
    "TransformNode",
    "TupleNode",
    "UnionNode",
    "UnknownNode",
    # Source reader
    "SchemaSourceError",
    "load_schema",
    "load_schema_source",
]
