# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Field descriptor types.

The field descriptor tree is the intermediate representation shared by the
mapping resolver, the code emitter and the schema writer. Every model here is
frozen; a descriptor tree is built once per pipeline run and never mutated.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from formsmith.introspection.labels import name_to_label

StringFormat = Literal["email", "url", "uuid", "cuid", "datetime"]


class FieldType(str, Enum):
    """Supported field kinds after unwrapping."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ENUM = "enum"
    OBJECT = "object"  # Ordered child fields
    ARRAY = "array"  # One element descriptor
    UNION = "union"  # Tagged variants
    TUPLE = "tuple"  # Positional element descriptors
    RECORD = "record"  # One value descriptor, string keys

    @property
    def is_composite(self) -> bool:
        return self in COMPOSITE_TYPES


SCALAR_TYPES = frozenset(
    {
        FieldType.STRING,
        FieldType.NUMBER,
        FieldType.BOOLEAN,
        FieldType.DATE,
        FieldType.ENUM,
    }
)
COMPOSITE_TYPES = frozenset(
    {
        FieldType.OBJECT,
        FieldType.ARRAY,
        FieldType.UNION,
        FieldType.TUPLE,
        FieldType.RECORD,
    }
)


class FieldConstraints(BaseModel):
    """Validation constraints read from a node's checks.

    ``None`` means unconstrained.
    """

    model_config = ConfigDict(frozen=True)

    # String constraints
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: StringFormat | None = None

    # Number constraints
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None
    is_int: bool | None = None

    # Collection constraints
    min_items: int | None = None
    max_items: int | None = None


class _Metadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    def children(self) -> tuple[FieldDescriptor, ...]:
        """Descriptors nested directly under this metadata."""
        return ()


class StringMetadata(_Metadata):
    kind: Literal["string"] = "string"


class NumberMetadata(_Metadata):
    kind: Literal["number"] = "number"


class BooleanMetadata(_Metadata):
    kind: Literal["boolean"] = "boolean"


class DateMetadata(_Metadata):
    kind: Literal["date"] = "date"


class EnumMetadata(_Metadata):
    kind: Literal["enum"] = "enum"
    values: tuple[str, ...] = Field(min_length=1)


class ObjectMetadata(_Metadata):
    kind: Literal["object"] = "object"
    fields: tuple[FieldDescriptor, ...] = ()

    def children(self) -> tuple[FieldDescriptor, ...]:
        return self.fields


class ArrayMetadata(_Metadata):
    kind: Literal["array"] = "array"
    element: FieldDescriptor

    def children(self) -> tuple[FieldDescriptor, ...]:
        return (self.element,)


class TupleMetadata(_Metadata):
    kind: Literal["tuple"] = "tuple"
    elements: tuple[FieldDescriptor, ...] = ()

    def children(self) -> tuple[FieldDescriptor, ...]:
        return self.elements


class RecordMetadata(_Metadata):
    kind: Literal["record"] = "record"
    value_descriptor: FieldDescriptor

    def children(self) -> tuple[FieldDescriptor, ...]:
        return (self.value_descriptor,)


class UnionVariant(BaseModel):
    """One union member: its tag value and its fields."""

    model_config = ConfigDict(frozen=True)

    value: str
    fields: tuple[FieldDescriptor, ...] = ()


class UnionMetadata(_Metadata):
    kind: Literal["union"] = "union"
    discriminator: str | None = None
    variants: tuple[UnionVariant, ...] = ()

    def children(self) -> tuple[FieldDescriptor, ...]:
        return tuple(field for variant in self.variants for field in variant.fields)


FieldMetadata = Annotated[
    Union[
        StringMetadata,
        NumberMetadata,
        BooleanMetadata,
        DateMetadata,
        EnumMetadata,
        ObjectMetadata,
        ArrayMetadata,
        TupleMetadata,
        RecordMetadata,
        UnionMetadata,
    ],
    Field(discriminator="kind"),
]


class FieldDescriptor(BaseModel):
    """A single form field.

    ``label`` defaults to a label derived from ``name``. Scalar kinds other
    than ``enum`` get their metadata filled in when it is omitted.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    label: str = ""
    description: str | None = None
    type: FieldType
    is_optional: bool = False
    is_nullable: bool = False
    constraints: FieldConstraints = Field(default_factory=FieldConstraints)
    metadata: FieldMetadata
    schema_ref: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("label") and isinstance(data.get("name"), str):
            data["label"] = name_to_label(data["name"])
        if data.get("metadata") is None and "type" in data:
            kind = FieldType(data["type"])
            if kind in SCALAR_TYPES and kind is not FieldType.ENUM:
                data["metadata"] = {"kind": kind.value}
        return data

    @model_validator(mode="after")
    def _check_metadata_kind(self) -> FieldDescriptor:
        if self.metadata.kind != self.type.value:
            raise ValueError(
                f'Field "{self.name}" has type "{self.type.value}" '
                f'but metadata kind is "{self.metadata.kind}"'
            )
        return self

    @property
    def required(self) -> bool:
        return not self.is_optional

    def children(self) -> tuple[FieldDescriptor, ...]:
        return self.metadata.children()


class FormStep(BaseModel):
    """One step of a multi-step (wizard) form."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str | None = None
    fields: tuple[str, ...] = ()


class FormDescriptor(BaseModel):
    """A complete form: root fields plus naming metadata.

    ``steps`` is ``None`` for a single-step form.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    schema_import_path: str
    schema_export_name: str
    warnings: tuple[str, ...] = ()
    steps: tuple[FormStep, ...] | None = None

    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]


for _model in (
    ObjectMetadata,
    ArrayMetadata,
    TupleMetadata,
    RecordMetadata,
    UnionVariant,
    UnionMetadata,
    FieldDescriptor,
    FormDescriptor,
):
    _model.model_rebuild()
