# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Fluent schema builder.

``z`` mirrors the Zod v4 constructor surface so schemas read the same in
Python as in the TypeScript they describe::

    from formsmith.schema import z

    user_schema = z.object({
        "name": z.string().min(1),
        "email": z.email(),
        "role": z.enum(["admin", "user"]),
    })
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from formsmith.schema.nodes import (
    AnyNode,
    ArrayNode,
    BigIntNode,
    BooleanNode,
    DateNode,
    EnumNode,
    IntersectionNode,
    LiteralNode,
    NullNode,
    NumberNode,
    ObjectNode,
    RecordNode,
    SchemaNode,
    SetNode,
    StringNode,
    TupleNode,
    UnionNode,
    UnknownNode,
)


class _IsoNamespace:
    """ISO string formats (``z.iso.datetime()``)."""

    def datetime(self) -> StringNode:
        return StringNode(format="datetime")


class SchemaBuilder:
    """Constructor namespace for schema nodes."""

    iso = _IsoNamespace()

    def string(self) -> StringNode:
        return StringNode()

    def email(self) -> StringNode:
        return StringNode(format="email")

    def url(self) -> StringNode:
        return StringNode(format="url")

    def uuid(self) -> StringNode:
        return StringNode(format="uuid")

    def cuid(self) -> StringNode:
        return StringNode(format="cuid")

    def number(self) -> NumberNode:
        return NumberNode()

    def boolean(self) -> BooleanNode:
        return BooleanNode()

    def date(self) -> DateNode:
        return DateNode()

    def enum(self, values: Iterable[str] | type[Enum]) -> EnumNode:
        """Build an enum from string values or a Python ``Enum`` class."""
        if isinstance(values, type) and issubclass(values, Enum):
            members = [str(member.value) for member in values]
        else:
            members = [str(value) for value in values]
        return EnumNode(entries={member: member for member in members})

    def literal(self, value: Any) -> LiteralNode:
        if isinstance(value, (list, tuple)):
            return LiteralNode(values=tuple(value))
        return LiteralNode(values=(value,))

    def object(self, shape: Mapping[str, SchemaNode] | None = None) -> ObjectNode:
        return ObjectNode(shape=dict(shape or {}))

    def array(self, element: SchemaNode) -> ArrayNode:
        return ArrayNode(element=element)

    def set(self, element: SchemaNode) -> SetNode:
        return SetNode(element=element)

    def tuple(self, items: Iterable[SchemaNode]) -> TupleNode:
        return TupleNode(items=tuple(items))

    def record(self, key_type: SchemaNode, value_type: SchemaNode) -> RecordNode:
        return RecordNode(key_type=key_type, value_type=value_type)

    def union(self, options: Iterable[SchemaNode]) -> UnionNode:
        return UnionNode(options=tuple(options))

    def discriminated_union(
        self, discriminator: str, options: Iterable[SchemaNode]
    ) -> UnionNode:
        return UnionNode(options=tuple(options), discriminator=discriminator)

    def intersection(self, left: SchemaNode, right: SchemaNode) -> IntersectionNode:
        return IntersectionNode(left=left, right=right)

    def any(self) -> AnyNode:
        return AnyNode()

    def unknown(self) -> UnknownNode:
        return UnknownNode()

    def bigint(self) -> BigIntNode:
        return BigIntNode()

    def null(self) -> NullNode:
        return NullNode()


z = SchemaBuilder()
