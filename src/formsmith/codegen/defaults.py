# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Default-value literals for the generated ``useForm`` call."""

from __future__ import annotations

from formsmith.codegen.escaping import js_literal, property_key
from formsmith.introspection.types import (
    EnumMetadata,
    FieldDescriptor,
    FieldType,
    ObjectMetadata,
    TupleMetadata,
)
from formsmith.mapping.types import ComponentConfig


def default_value(
    descriptor: FieldDescriptor,
    config: ComponentConfig | None = None,
    level: int = 3,
) -> str:
    """Render the initial value of one field as a JS literal.

    ``level`` is the nesting depth in two-space steps, used to lay out
    object literals over several lines.
    """
    kind = descriptor.type
    metadata = descriptor.metadata
    if kind == FieldType.STRING:
        return '""'
    if kind == FieldType.NUMBER:
        minimum = descriptor.constraints.min
        return js_literal(minimum) if minimum is not None else "0"
    if kind == FieldType.BOOLEAN:
        return "false"
    if kind == FieldType.DATE:
        return "undefined"
    if isinstance(metadata, EnumMetadata):
        return js_literal(metadata.values[0])
    if isinstance(metadata, ObjectMetadata):
        return _object_literal(metadata, config, level)
    if isinstance(metadata, TupleMetadata):
        elements = [default_value(element, None, level) for element in metadata.elements]
        return f"[{', '.join(elements)}]"
    if kind == FieldType.ARRAY:
        return "[]"
    return "{}"


def _object_literal(
    metadata: ObjectMetadata, config: ComponentConfig | None, level: int
) -> str:
    if not metadata.fields:
        return "{}"
    child_configs = (config.props.child_configs if config else None) or {}
    inner_pad = " " * ((level + 1) * 2)
    close_pad = " " * (level * 2)
    lines = [
        f"{inner_pad}{property_key(child.name)}: "
        f"{default_value(child, child_configs.get(child.name), level + 1)},"
        for child in metadata.fields
    ]
    body = "\n".join(lines)
    return f"{{\n{body}\n{close_pad}}}"


def default_values(
    fields: tuple[FieldDescriptor, ...],
    configs: dict[str, ComponentConfig],
    level: int = 3,
) -> str:
    """Render one ``key: value,`` line per root field."""
    pad = " " * (level * 2)
    return "\n".join(
        f"{pad}{property_key(field.name)}: "
        f"{default_value(field, configs.get(field.name), level)},"
        for field in fields
    )
