# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Default mapping rules, applied in order; the first match wins.

Composite kinds come first and match on kind alone. Scalar rules follow,
most specific first.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from formsmith.introspection.types import EnumMetadata, FieldDescriptor, FieldType
from formsmith.mapping.types import ComponentType, MappingRule

RADIO_GROUP_MAX_OPTIONS = 4
SLIDER_MAX_RANGE = 100
TEXTAREA_MIN_LENGTH = 100


def _is(kind: FieldType) -> Callable[[FieldDescriptor], bool]:
    return lambda f: f.type == kind


def _enum_options(f: FieldDescriptor) -> dict[str, Any]:
    if isinstance(f.metadata, EnumMetadata):
        return {"options": f.metadata.values}
    return {}


def _is_small_enum(f: FieldDescriptor) -> bool:
    return (
        f.type == FieldType.ENUM
        and isinstance(f.metadata, EnumMetadata)
        and len(f.metadata.values) <= RADIO_GROUP_MAX_OPTIONS
    )


def _is_bounded_number(f: FieldDescriptor) -> bool:
    if f.type != FieldType.NUMBER:
        return False
    low, high = f.constraints.min, f.constraints.max
    if low is None or high is None:
        return False
    return high - low <= SLIDER_MAX_RANGE


def _is_long_string(f: FieldDescriptor) -> bool:
    if f.type != FieldType.STRING:
        return False
    max_length = f.constraints.max_length
    return max_length is not None and max_length > TEXTAREA_MIN_LENGTH


DEFAULT_RULES: tuple[MappingRule, ...] = (
    # Composite types
    MappingRule("object-fieldset", _is(FieldType.OBJECT), ComponentType.FIELDSET),
    MappingRule("array-field-array", _is(FieldType.ARRAY), ComponentType.FIELD_ARRAY),
    MappingRule("union-switch", _is(FieldType.UNION), ComponentType.UNION_SWITCH),
    MappingRule("tuple-fieldset", _is(FieldType.TUPLE), ComponentType.FIELDSET),
    MappingRule("record-field-array", _is(FieldType.RECORD), ComponentType.FIELD_ARRAY),
    # Scalar types
    MappingRule("boolean-checkbox", _is(FieldType.BOOLEAN), ComponentType.CHECKBOX),
    MappingRule(
        "enum-radio-group", _is_small_enum, ComponentType.RADIO_GROUP, _enum_options
    ),
    MappingRule("enum-select", _is(FieldType.ENUM), ComponentType.SELECT, _enum_options),
    MappingRule("date-picker", _is(FieldType.DATE), ComponentType.DATE_PICKER),
    MappingRule(
        "number-slider",
        _is_bounded_number,
        ComponentType.SLIDER,
        lambda f: {
            "min": f.constraints.min,
            "max": f.constraints.max,
            "step": f.constraints.step if f.constraints.step is not None else 1,
        },
    ),
    MappingRule(
        "number-input",
        _is(FieldType.NUMBER),
        ComponentType.INPUT,
        lambda f: {
            "type": "number",
            "min": f.constraints.min,
            "max": f.constraints.max,
            "step": f.constraints.step,
        },
    ),
    MappingRule(
        "string-email",
        lambda f: f.type == FieldType.STRING and f.constraints.format == "email",
        ComponentType.INPUT,
        lambda f: {"type": "email"},
    ),
    MappingRule(
        "string-url",
        lambda f: f.type == FieldType.STRING and f.constraints.format == "url",
        ComponentType.INPUT,
        lambda f: {"type": "url"},
    ),
    MappingRule(
        "string-textarea",
        _is_long_string,
        ComponentType.TEXTAREA,
        lambda f: {"max_length": f.constraints.max_length},
    ),
    MappingRule(
        "string-default",
        _is(FieldType.STRING),
        ComponentType.INPUT,
        lambda f: {
            "type": "text",
            "min_length": f.constraints.min_length,
            "max_length": f.constraints.max_length,
            "pattern": f.constraints.pattern,
        },
    ),
)


def find_matching_rule(
    descriptor: FieldDescriptor, rules: Iterable[MappingRule] = DEFAULT_RULES
) -> MappingRule | None:
    """Return the first rule matching ``descriptor``, or ``None``."""
    return next((rule for rule in rules if rule.match(descriptor)), None)
