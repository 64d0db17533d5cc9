# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Component configuration types.

A ``ComponentConfig`` is the resolved form of one ``FieldDescriptor``: the
UI component that renders it, the props that component receives and the
label/description/required chrome around it. Composite configs carry their
children's configs and source descriptors so the code emitter can recurse.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from formsmith.introspection.types import FieldDescriptor


class ComponentType(str, Enum):
    """UI components a field can resolve to."""

    INPUT = "Input"
    TEXTAREA = "Textarea"
    CHECKBOX = "Checkbox"
    RADIO_GROUP = "RadioGroup"
    SELECT = "Select"
    SLIDER = "Slider"
    DATE_PICKER = "DatePicker"
    FIELDSET = "Fieldset"  # Objects and tuples
    FIELD_ARRAY = "FieldArray"  # Arrays and records
    UNION_SWITCH = "UnionSwitch"  # Tagged unions

    @property
    def is_composite(self) -> bool:
        return self in (
            ComponentType.FIELDSET,
            ComponentType.FIELD_ARRAY,
            ComponentType.UNION_SWITCH,
        )


class VariantConfig(BaseModel):
    """A resolved union variant."""

    model_config = ConfigDict(frozen=True)

    value: str
    fields: tuple[FieldDescriptor, ...] = ()
    configs: dict[str, ComponentConfig] = {}


class ComponentProps(BaseModel):
    """Props passed to a component.

    Rule-specific props not declared here are kept as extra attributes.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    # Scalar props
    type: str | None = None
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    options: tuple[str, ...] | None = None

    # Fieldset: objects and tuples
    child_configs: dict[str, ComponentConfig] | None = None
    child_fields: tuple[FieldDescriptor, ...] | None = None

    # FieldArray: array element or record value
    element_config: ComponentConfig | None = None
    element_field: FieldDescriptor | None = None

    # UnionSwitch
    discriminator: str | None = None
    variant_configs: tuple[VariantConfig, ...] | None = None


class FieldProps(BaseModel):
    """Chrome rendered around every control."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str | None = None
    required: bool = True


class ComponentConfig(BaseModel):
    """A field resolved to a concrete component."""

    model_config = ConfigDict(frozen=True)

    component: ComponentType
    props: ComponentProps = Field(default_factory=ComponentProps)
    field_props: FieldProps


def _no_props(descriptor: FieldDescriptor) -> dict[str, Any]:
    return {}


@dataclass(frozen=True)
class MappingRule:
    """An ordered mapping rule: first rule whose ``match`` is true wins."""

    name: str
    match: Callable[[FieldDescriptor], bool]
    component: ComponentType
    get_props: Callable[[FieldDescriptor], dict[str, Any]] = field(default=_no_props)


for _model in (VariantConfig, ComponentProps, ComponentConfig):
    _model.model_rebuild()
