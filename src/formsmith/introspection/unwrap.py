# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Peel optional and nullable wrappers off a schema node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from formsmith.introspection.errors import StructuralError

WRAPPER_TYPES = ("optional", "nullable")


@dataclass(frozen=True)
class UnwrapResult:
    """The innermost non-wrapper node and the wrappers that were removed."""

    inner: Any
    is_optional: bool = False
    is_nullable: bool = False


def is_schema_node(value: Any) -> bool:
    """Whether ``value`` exposes a string ``type`` tag."""
    return isinstance(getattr(value, "type", None), str)


def unwrap_schema(node: Any) -> UnwrapResult:
    """Unwrap ``optional``/``nullable`` layers in any order and depth.

    Raises:
        StructuralError: If ``node`` (or anything it unwraps to) is not a
            schema node, or a wrapper has no callable ``unwrap``
    """
    if not is_schema_node(node):
        raise StructuralError(
            "Schema is not a recognised schema node",
            value_type=type(node).__name__,
        )

    current = node
    is_optional = False
    is_nullable = False

    while current.type in WRAPPER_TYPES:
        if current.type == "optional":
            is_optional = True
        else:
            is_nullable = True
        unwrap = getattr(current, "unwrap", None)
        if not callable(unwrap):
            raise StructuralError(
                f"{current.type} schema missing unwrap method", node_type=current.type
            )
        current = unwrap()
        if not is_schema_node(current):
            raise StructuralError(
                "Wrapper unwrapped to a value that is not a schema node",
                value_type=type(current).__name__,
            )

    return UnwrapResult(inner=current, is_optional=is_optional, is_nullable=is_nullable)
