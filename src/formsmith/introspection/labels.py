# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Human-readable labels derived from field names and option values."""

from __future__ import annotations

import re

_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_TO_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_OPTION_CASE_BREAK = re.compile(r"([a-z])([A-Z])")


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def name_to_label(name: str) -> str:
    """Convert a camelCase or PascalCase name to a label.

    Consecutive capitals are kept together as an acronym:

        >>> name_to_label("firstName")
        'First Name'
        >>> name_to_label("myURLPath")
        'My URL Path'
    """
    label = _LOWER_TO_UPPER.sub(r"\1 \2", name)
    label = _ACRONYM_TO_WORD.sub(r"\1 \2", label)
    return _capitalize_first(label).strip()


def format_option_label(value: str) -> str:
    """Display text for an enum option value (``in_progress`` -> ``In progress``)."""
    label = _OPTION_CASE_BREAK.sub(r"\1 \2", value).replace("_", " ")
    return _capitalize_first(label)
