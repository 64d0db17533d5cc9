# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Resolve field descriptors to component configs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from formsmith.introspection.types import (
    ArrayMetadata,
    FieldDescriptor,
    ObjectMetadata,
    RecordMetadata,
    TupleMetadata,
    UnionMetadata,
)
from formsmith.logging import get_logger
from formsmith.mapping.errors import UnmappedComponentError
from formsmith.mapping.rules import DEFAULT_RULES, find_matching_rule
from formsmith.mapping.types import (
    ComponentConfig,
    ComponentProps,
    FieldProps,
    MappingRule,
    VariantConfig,
)

logger = get_logger("formsmith.mapping")


def resolve_field(
    descriptor: FieldDescriptor, rules: Iterable[MappingRule] | None = None
) -> ComponentConfig:
    """Resolve a field, and for composites every nested field, to a component.

    Args:
        descriptor: The field to resolve
        rules: Ordered rules to match against; a ``MappingRegistry`` works
            too. Defaults to the built-in rules.

    Returns:
        The component config, with child configs attached for composites

    Raises:
        UnmappedComponentError: If no rule matches this field or a nested one
    """
    table = DEFAULT_RULES if rules is None else tuple(rules)
    return _resolve(descriptor, table)


def _resolve_all(
    fields: Iterable[FieldDescriptor], rules: Sequence[MappingRule]
) -> dict[str, ComponentConfig]:
    return {child.name: _resolve(child, rules) for child in fields}


def _resolve(descriptor: FieldDescriptor, rules: Sequence[MappingRule]) -> ComponentConfig:
    rule = find_matching_rule(descriptor, rules)
    if rule is None:
        raise UnmappedComponentError(descriptor.name, descriptor.type.value)

    logger.debug("Matched mapping rule", field=descriptor.name, rule=rule.name)
    props: dict[str, Any] = dict(rule.get_props(descriptor))
    metadata = descriptor.metadata

    if isinstance(metadata, ObjectMetadata):
        props["child_configs"] = _resolve_all(metadata.fields, rules)
        props["child_fields"] = metadata.fields
    elif isinstance(metadata, TupleMetadata):
        props["child_configs"] = _resolve_all(metadata.elements, rules)
        props["child_fields"] = metadata.elements
    elif isinstance(metadata, ArrayMetadata):
        props["element_config"] = _resolve(metadata.element, rules)
        props["element_field"] = metadata.element
    elif isinstance(metadata, RecordMetadata):
        props["element_config"] = _resolve(metadata.value_descriptor, rules)
        props["element_field"] = metadata.value_descriptor
    elif isinstance(metadata, UnionMetadata):
        props["discriminator"] = metadata.discriminator
        props["variant_configs"] = tuple(
            VariantConfig(
                value=variant.value,
                fields=variant.fields,
                configs=_resolve_all(variant.fields, rules),
            )
            for variant in metadata.variants
        )

    return ComponentConfig(
        component=rule.component,
        props=ComponentProps(**props),
        field_props=FieldProps(
            label=descriptor.label,
            description=descriptor.description,
            required=not descriptor.is_optional,
        ),
    )
