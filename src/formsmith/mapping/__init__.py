# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
Field-to-component mapping.
"""

from __future__ import annotations

from formsmith.mapping.errors import UnmappedComponentError
from formsmith.mapping.registry import MappingRegistry
from formsmith.mapping.resolver import resolve_field
from formsmith.mapping.rules import DEFAULT_RULES, find_matching_rule
from formsmith.mapping.types import (
    ComponentConfig,
    ComponentProps,
    ComponentType,
    FieldProps,
    MappingRule,
    VariantConfig,
)

__all__ = [
    # Resolution
    "resolve_field",
    "find_matching_rule",
    "DEFAULT_RULES",
    "MappingRegistry",
    # Types
    "ComponentConfig",
    "ComponentProps",
    "ComponentType",
    "FieldProps",
    "MappingRule",
    "VariantConfig",
    # Errors
    "UnmappedComponentError",
]
