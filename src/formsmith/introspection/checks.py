# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Constraint extraction from a schema node's checks."""

from __future__ import annotations

from typing import Any

from formsmith.introspection.types import FieldConstraints

KNOWN_FORMATS = frozenset({"email", "url", "uuid", "cuid", "datetime"})
COLLECTION_TYPES = frozenset({"array", "set", "tuple"})


def extract_constraints(
    node: Any, unknown_checks: list[str] | None = None
) -> FieldConstraints:
    """Read a node's checks into a flat constraints record.

    Call this on an unwrapped node; wrappers carry no checks of their own.
    Check names this function does not understand are appended to
    ``unknown_checks`` when a list is given. It never raises.
    """
    node_type = getattr(node, "type", None)
    values: dict[str, Any] = {}

    if node_type == "string":
        shorthand = getattr(node, "format", None)
        if shorthand in KNOWN_FORMATS:
            values["format"] = shorthand

    is_collection = node_type in COLLECTION_TYPES
    min_key = "min_items" if is_collection else "min_length"
    max_key = "max_items" if is_collection else "max_length"

    for check in getattr(node, "checks", None) or ():
        name = getattr(check, "check", None)
        if name is None:
            continue
        minimum = getattr(check, "minimum", None)
        maximum = getattr(check, "maximum", None)
        value = getattr(check, "value", None)
        fmt = getattr(check, "format", None)

        if name == "min_length":
            if minimum is not None:
                values[min_key] = minimum
        elif name == "max_length":
            if maximum is not None:
                values[max_key] = maximum
        elif name == "string_format":
            pattern = getattr(check, "pattern", None)
            if fmt == "regex" and pattern:
                values["pattern"] = pattern
            elif fmt in KNOWN_FORMATS:
                values["format"] = fmt
        elif name == "greater_than":
            if value is not None:
                values["min"] = value
        elif name == "less_than":
            if value is not None:
                values["max"] = value
        elif name == "number_format":
            if getattr(check, "is_int", False):
                values["is_int"] = True
        elif name == "multiple_of":
            if value is not None:
                values["step"] = value
        elif unknown_checks is not None:
            unknown_checks.append(name)

    return FieldConstraints(**values)
