# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Zod v4 expressions for field descriptors.

Each kind emits its base builder followed by its constraint chain in a
fixed order, then the wrappers: ``.nullable()``, ``.optional()`` and
``.describe()``, in that order. A field with a ``schema_ref`` is emitted as
the bare identifier of the named schema and is never wrapped.
"""

from __future__ import annotations

import json

from formsmith.codegen.escaping import property_key
from formsmith.introspection.types import (
    ArrayMetadata,
    EnumMetadata,
    FieldDescriptor,
    FieldType,
    ObjectMetadata,
    RecordMetadata,
    TupleMetadata,
    UnionMetadata,
    UnionVariant,
)

_STRING_BASES = {
    "email": "z.email()",
    "url": "z.url()",
    "uuid": "z.uuid()",
    "cuid": "z.cuid()",
    "datetime": "z.iso.datetime()",
}


def emit_field(descriptor: FieldDescriptor) -> str:
    """Emit the Zod expression for one field."""
    if descriptor.schema_ref:
        return descriptor.schema_ref

    expr = _base(descriptor)
    if descriptor.is_nullable:
        expr += ".nullable()"
    if descriptor.is_optional:
        expr += ".optional()"
    if descriptor.description:
        expr += f".describe({json.dumps(descriptor.description)})"
    return expr


def _number(value: int | float) -> str:
    return json.dumps(value)


def regex_literal(pattern: str) -> str:
    """Wrap a pattern in ``/.../``, escaping any bare forward slash."""
    out = []
    escaped = False
    for char in pattern:
        if escaped:
            out.append(char)
            escaped = False
        elif char == "\\":
            out.append(char)
            escaped = True
        elif char == "/":
            out.append("\\/")
        elif char == "\n":
            out.append("\\n")
        else:
            out.append(char)
    return f"/{''.join(out)}/"


def _base(descriptor: FieldDescriptor) -> str:
    kind = descriptor.type
    constraints = descriptor.constraints
    metadata = descriptor.metadata

    if kind == FieldType.STRING:
        expr = _STRING_BASES.get(constraints.format or "", "z.string()")
        if constraints.min_length is not None:
            expr += f".min({constraints.min_length})"
        if constraints.max_length is not None:
            expr += f".max({constraints.max_length})"
        if constraints.pattern is not None:
            expr += f".regex({regex_literal(constraints.pattern)})"
        return expr

    if kind == FieldType.NUMBER:
        # .int() is a check on z.number(); the check is what introspection reads back
        expr = "z.number()"
        if constraints.is_int:
            expr += ".int()"
        if constraints.min is not None:
            expr += f".min({_number(constraints.min)})"
        if constraints.max is not None:
            expr += f".max({_number(constraints.max)})"
        if constraints.step is not None:
            expr += f".multipleOf({_number(constraints.step)})"
        return expr

    if kind == FieldType.BOOLEAN:
        return "z.boolean()"
    if kind == FieldType.DATE:
        return "z.date()"

    if isinstance(metadata, EnumMetadata):
        return f"z.enum([{', '.join(json.dumps(v) for v in metadata.values)}])"

    if isinstance(metadata, ArrayMetadata):
        expr = f"z.array({emit_field(metadata.element)})"
        if constraints.min_items is not None:
            expr += f".min({constraints.min_items})"
        if constraints.max_items is not None:
            expr += f".max({constraints.max_items})"
        return expr

    if isinstance(metadata, TupleMetadata):
        return f"z.tuple([{', '.join(emit_field(e) for e in metadata.elements)}])"

    if isinstance(metadata, ObjectMetadata):
        return _object(metadata.fields)

    if isinstance(metadata, RecordMetadata):
        return f"z.record(z.string(), {emit_field(metadata.value_descriptor)})"

    if isinstance(metadata, UnionMetadata):
        if metadata.discriminator is not None:
            return _discriminated_union(metadata.discriminator, metadata.variants)
        return f"z.union([{', '.join(_plain_option(v) for v in metadata.variants)}])"

    raise ValueError(f'Field "{descriptor.name}" has no emitter for type "{kind.value}"')


def _object(fields: tuple[FieldDescriptor, ...], overrides: dict[str, str] | None = None) -> str:
    overrides = overrides or {}
    entries = [
        f"{property_key(child.name)}: {overrides.get(child.name) or emit_field(child)}"
        for child in fields
    ]
    if not entries:
        return "z.object({})"
    return f"z.object({{ {', '.join(entries)} }})"


def _discriminated_union(discriminator: str, variants: tuple[UnionVariant, ...]) -> str:
    # The discriminator introspects as a plain string; rebuild it as a literal
    members = [
        _object(variant.fields, {discriminator: f"z.literal({json.dumps(variant.value)})"})
        for variant in variants
    ]
    return f"z.discriminatedUnion({json.dumps(discriminator)}, [{', '.join(members)}])"


def _plain_option(variant: UnionVariant) -> str:
    fields = variant.fields
    synthetic = (
        variant.value.startswith("variant_")
        and len(fields) == 1
        and fields[0].name.startswith("option_")
    )
    if synthetic:
        return emit_field(fields[0])
    return _object(fields)
