# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Escaping and layout helpers for emitted TSX."""

from __future__ import annotations

import json
import re
from typing import Any

VALID_IDENTIFIER = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")
_TEXT_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("{", "&#123;"),
    ("}", "&#125;"),
)


def escape_attribute(value: str) -> str:
    """Escape text for a double-quoted JSX attribute value."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def escape_text(value: str) -> str:
    """Escape text for a JSX text node."""
    for char, entity in _TEXT_ESCAPES:
        value = value.replace(char, entity)
    return value


def escape_template(value: str) -> str:
    """Escape text placed inside a JS template literal."""
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def js_literal(value: Any) -> str:
    """Render a Python value as a JS literal."""
    return json.dumps(value)


def indent(text: str, spaces: int) -> str:
    """Indent every non-blank line of ``text`` by ``spaces``."""
    pad = " " * spaces
    return "\n".join(
        f"{pad}{line}" if line.strip() else line for line in text.split("\n")
    )


def property_key(name: str) -> str:
    """An object-literal key: bare when it is an identifier, quoted otherwise."""
    return name if VALID_IDENTIFIER.fullmatch(name) else json.dumps(name)


def member_access(base: str, names: list[str] | tuple[str, ...]) -> str:
    """A JS member expression reaching ``names`` from ``base``.

    Identifier names use dot access; any other name is bracketed and quoted,
    so ``member_access("item", ["pay-method"])`` gives ``item["pay-method"]``.
    """
    for name in names:
        base += f".{name}" if VALID_IDENTIFIER.fullmatch(name) else f"[{json.dumps(name)}]"
    return base
