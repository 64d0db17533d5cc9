# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Schema node definitions.

A schema node is an immutable description of one type or validation rule in
the source validation system. Nodes mirror the Zod v4 capability surface: a
``type`` tag, an ordered ``checks`` tuple, an optional ``description`` and the
kind-specific children (``shape``, ``element``, ``items``, ``options`` ...).
Wrapper nodes expose ``unwrap()``.

Nodes only describe structure. Nothing here validates data.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

STRING_FORMATS = ("email", "url", "uuid", "cuid", "datetime")


class Check(BaseModel):
    """A single check attached to a schema node, in declaration order."""

    model_config = ConfigDict(frozen=True)

    check: str
    minimum: int | float | None = None
    maximum: int | float | None = None
    value: Any = None
    inclusive: bool = True
    format: str | None = None
    pattern: str | None = None
    is_int: bool = False


class SchemaNode(BaseModel):
    """Base class for every schema node."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str
    checks: tuple[Check, ...] = ()
    description: str | None = None

    def _with_check(self, check: Check) -> Any:
        return self.model_copy(update={"checks": (*self.checks, check)})

    def optional(self) -> OptionalNode:
        """Allow the value to be absent."""
        return OptionalNode(inner_type=self)

    def nullable(self) -> NullableNode:
        """Allow the value to be null."""
        return NullableNode(inner_type=self)

    def describe(self, description: str) -> Any:
        """Attach a human-readable description."""
        return self.model_copy(update={"description": description})

    def transform(self, fn: Callable[[Any], Any] | None = None) -> PipeNode:
        """Pipe this node into a transform step."""
        return PipeNode(input=self, output=TransformNode(fn=fn))

    def pipe(self, target: SchemaNode) -> PipeNode:
        """Pipe this node's output into another schema."""
        return PipeNode(input=self, output=target)

    def and_(self, other: SchemaNode) -> IntersectionNode:
        """Intersect this node with another."""
        return IntersectionNode(left=self, right=other)

    def refine(self, fn: Callable[[Any], bool] | None = None) -> Any:
        """Attach a custom check. Only its presence is recorded."""
        return self._with_check(Check(check="custom"))


class StringNode(SchemaNode):
    type: Literal["string"] = "string"
    format: str | None = None

    def min(self, length: int) -> StringNode:
        return self._with_check(Check(check="min_length", minimum=length))

    def max(self, length: int) -> StringNode:
        return self._with_check(Check(check="max_length", maximum=length))

    def length(self, length: int) -> StringNode:
        return self._with_check(Check(check="length_equals", value=length))

    def nonempty(self) -> StringNode:
        return self.min(1)

    def regex(self, pattern: str | re.Pattern[str]) -> StringNode:
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        return self._with_check(
            Check(check="string_format", format="regex", pattern=source)
        )

    def _format_check(self, fmt: str) -> StringNode:
        return self._with_check(Check(check="string_format", format=fmt))

    def email(self) -> StringNode:
        return self._format_check("email")

    def url(self) -> StringNode:
        return self._format_check("url")

    def uuid(self) -> StringNode:
        return self._format_check("uuid")

    def cuid(self) -> StringNode:
        return self._format_check("cuid")

    def datetime(self) -> StringNode:
        return self._format_check("datetime")

    def starts_with(self, prefix: str) -> StringNode:
        return self._with_check(
            Check(check="string_format", format="starts_with", value=prefix)
        )

    def ends_with(self, suffix: str) -> StringNode:
        return self._with_check(
            Check(check="string_format", format="ends_with", value=suffix)
        )

    def trim(self) -> StringNode:
        return self._with_check(Check(check="overwrite"))

    def lowercase(self) -> StringNode:
        return self._with_check(Check(check="overwrite"))


class NumberNode(SchemaNode):
    type: Literal["number"] = "number"

    def min(self, value: int | float) -> NumberNode:
        return self._with_check(Check(check="greater_than", value=value, inclusive=True))

    def max(self, value: int | float) -> NumberNode:
        return self._with_check(Check(check="less_than", value=value, inclusive=True))

    def gt(self, value: int | float) -> NumberNode:
        return self._with_check(Check(check="greater_than", value=value, inclusive=False))

    def lt(self, value: int | float) -> NumberNode:
        return self._with_check(Check(check="less_than", value=value, inclusive=False))

    def positive(self) -> NumberNode:
        return self.gt(0)

    def nonnegative(self) -> NumberNode:
        return self.min(0)

    def int(self) -> NumberNode:
        return self._with_check(Check(check="number_format", format="safeint", is_int=True))

    def multiple_of(self, value: int | float) -> NumberNode:
        return self._with_check(Check(check="multiple_of", value=value))

    step = multiple_of


class BooleanNode(SchemaNode):
    type: Literal["boolean"] = "boolean"


class DateNode(SchemaNode):
    type: Literal["date"] = "date"


class EnumNode(SchemaNode):
    type: Literal["enum"] = "enum"
    entries: dict[str, str] = Field(default_factory=dict)

    @property
    def options(self) -> list[str]:
        return list(self.entries)


class LiteralNode(SchemaNode):
    type: Literal["literal"] = "literal"
    values: tuple[Any, ...]

    @property
    def value(self) -> Any:
        return self.values[0]


class ObjectNode(SchemaNode):
    type: Literal["object"] = "object"
    shape: dict[str, SchemaNode] = Field(default_factory=dict)

    def extend(self, shape: dict[str, SchemaNode]) -> ObjectNode:
        return self.model_copy(update={"shape": {**self.shape, **shape}})

    def keyof(self) -> EnumNode:
        return EnumNode(entries={key: key for key in self.shape})


class ArrayNode(SchemaNode):
    type: Literal["array"] = "array"
    element: SchemaNode

    def min(self, length: int) -> ArrayNode:
        return self._with_check(Check(check="min_length", minimum=length))

    def max(self, length: int) -> ArrayNode:
        return self._with_check(Check(check="max_length", maximum=length))

    def length(self, length: int) -> ArrayNode:
        return self._with_check(Check(check="length_equals", value=length))

    def nonempty(self) -> ArrayNode:
        return self.min(1)


class SetNode(SchemaNode):
    type: Literal["set"] = "set"
    element: SchemaNode


class TupleNode(SchemaNode):
    type: Literal["tuple"] = "tuple"
    items: tuple[SchemaNode, ...] = ()


class RecordNode(SchemaNode):
    type: Literal["record"] = "record"
    key_type: SchemaNode
    value_type: SchemaNode


class UnionNode(SchemaNode):
    type: Literal["union"] = "union"
    options: tuple[SchemaNode, ...]
    discriminator: str | None = None


class IntersectionNode(SchemaNode):
    type: Literal["intersection"] = "intersection"
    left: SchemaNode
    right: SchemaNode


class OptionalNode(SchemaNode):
    type: Literal["optional"] = "optional"
    inner_type: SchemaNode

    def unwrap(self) -> SchemaNode:
        return self.inner_type


class NullableNode(SchemaNode):
    type: Literal["nullable"] = "nullable"
    inner_type: SchemaNode

    def unwrap(self) -> SchemaNode:
        return self.inner_type


class TransformNode(SchemaNode):
    type: Literal["transform"] = "transform"
    fn: Callable[[Any], Any] | None = Field(default=None, exclude=True)


class PipeNode(SchemaNode):
    type: Literal["pipe"] = "pipe"
    input: SchemaNode
    output: SchemaNode


class AnyNode(SchemaNode):
    type: Literal["any"] = "any"


class UnknownNode(SchemaNode):
    type: Literal["unknown"] = "unknown"


class BigIntNode(SchemaNode):
    type: Literal["bigint"] = "bigint"


class NullNode(SchemaNode):
    type: Literal["null"] = "null"


for _node_cls in (
    SchemaNode,
    StringNode,
    NumberNode,
    BooleanNode,
    DateNode,
    EnumNode,
    LiteralNode,
    ObjectNode,
    ArrayNode,
    SetNode,
    TupleNode,
    RecordNode,
    UnionNode,
    IntersectionNode,
    OptionalNode,
    NullableNode,
    TransformNode,
    PipeNode,
    AnyNode,
    UnknownNode,
    BigIntNode,
    NullNode,
):
    _node_cls.model_rebuild()
