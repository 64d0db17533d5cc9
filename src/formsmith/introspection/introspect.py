# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Schema introspection.

Converts an object-rooted schema node into a ``FormDescriptor``. The root
must be an object, or an intersection of objects; anything else is a
``StructuralError``. Below the root the walk is tolerant: a field of a kind
the form layer cannot represent is recorded as a warning and degraded to a
plain string field, and unknown checks are reported the same way.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from formsmith.introspection.checks import extract_constraints
from formsmith.introspection.errors import SCHEMA_UNKNOWN_STEP_FIELD, StructuralError
from formsmith.introspection.types import (
    ArrayMetadata,
    BooleanMetadata,
    DateMetadata,
    EnumMetadata,
    FieldConstraints,
    FieldDescriptor,
    FieldMetadata,
    FieldType,
    FormDescriptor,
    FormStep,
    NumberMetadata,
    ObjectMetadata,
    RecordMetadata,
    StringMetadata,
    TupleMetadata,
    UnionMetadata,
    UnionVariant,
)
from formsmith.introspection.unwrap import is_schema_node, unwrap_schema
from formsmith.logging import get_logger

logger = get_logger("formsmith.introspection")

SUPPORTED_TYPES = frozenset(kind.value for kind in FieldType)

ARRAY_ELEMENT_NAME = "item"
RECORD_VALUE_NAME = "value"


@dataclass
class _Peeled:
    """A field's node with wrappers and pipes removed."""

    node: Any
    kind: str
    is_optional: bool = False
    is_nullable: bool = False
    description: str | None = None
    literal_values: tuple[Any, ...] = field(default_factory=tuple)


def _literal_kind(values: tuple[Any, ...]) -> str:
    if not values:
        return "literal"
    if len(values) > 1:
        return "enum" if all(isinstance(v, str) for v in values) else "literal"
    value = values[0]
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    return "literal"


def _peel(node: Any) -> _Peeled:
    """Unwrap wrappers, follow pipes to their input side, resolve literals."""
    is_optional = False
    is_nullable = False
    descriptions: list[str | None] = []
    current = node

    while True:
        descriptions.append(getattr(current, "description", None))
        unwrapped = unwrap_schema(current)
        is_optional = is_optional or unwrapped.is_optional
        is_nullable = is_nullable or unwrapped.is_nullable
        current = unwrapped.inner
        if current.type != "pipe":
            break
        descriptions.append(current.description)
        current = current.input

    descriptions.append(getattr(current, "description", None))
    description = next((text for text in reversed(descriptions) if text), None)

    kind = current.type
    literal_values: tuple[Any, ...] = ()
    if kind == "literal":
        literal_values = tuple(getattr(current, "values", ()))
        kind = _literal_kind(literal_values)

    return _Peeled(
        node=current,
        kind=kind,
        is_optional=is_optional,
        is_nullable=is_nullable,
        description=description,
        literal_values=literal_values,
    )


def _object_shape(node: Any) -> dict[str, Any] | None:
    """The shape of an object node or an intersection of objects.

    Intersections are flattened left to right; the right operand wins on a
    key collision. Returns ``None`` when the node is not object-shaped.
    """
    if not is_schema_node(node):
        return None
    if node.type == "object":
        return dict(node.shape)
    if node.type == "intersection":
        left = _object_shape(node.left)
        right = _object_shape(node.right)
        if left is None or right is None:
            return None
        return {**left, **right}
    return None


class _Introspector:
    """Walks one schema; collects warnings along the way."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)
        logger.debug("Introspection warning", warning=message)

    def fields(
        self, shape: Mapping[str, Any], parent: str | None
    ) -> tuple[FieldDescriptor, ...]:
        return tuple(
            self.field(name, node, f"{parent}.{name}" if parent else name)
            for name, node in shape.items()
        )

    def field(self, name: str, node: Any, path: str) -> FieldDescriptor:
        peeled = _peel(node)
        kind = peeled.kind
        inner = peeled.node

        if kind == "intersection":
            shape = _object_shape(inner)
            if shape is not None:
                kind = "object"
        else:
            shape = None

        if kind not in SUPPORTED_TYPES:
            self.warn(
                f'Field "{path}": unsupported type "{kind}" -- '
                "rendered as a plain text input"
            )
            return self._degraded(name, peeled)

        if kind == "enum" and not self._enum_values(peeled):
            self.warn(
                f'Field "{path}": enum has no values -- rendered as a plain text input'
            )
            return self._degraded(name, peeled)

        constraints = FieldConstraints()
        if not peeled.literal_values:
            unknown_checks: list[str] = []
            constraints = extract_constraints(inner, unknown_checks)
            for check in unknown_checks:
                self.warn(
                    f'Field "{path}": unknown check "{check}" -- '
                    "constraint not reflected in generated form"
                )

        metadata = self._metadata(kind, inner, peeled, path, shape)
        return FieldDescriptor(
            name=name,
            description=peeled.description,
            type=FieldType(kind),
            is_optional=peeled.is_optional,
            is_nullable=peeled.is_nullable,
            constraints=constraints,
            metadata=metadata,
        )

    def _degraded(self, name: str, peeled: _Peeled) -> FieldDescriptor:
        return FieldDescriptor(
            name=name,
            description=peeled.description,
            type=FieldType.STRING,
            is_optional=peeled.is_optional,
            is_nullable=peeled.is_nullable,
            metadata=StringMetadata(),
        )

    @staticmethod
    def _enum_values(peeled: _Peeled) -> tuple[str, ...]:
        if peeled.literal_values:
            return tuple(str(value) for value in peeled.literal_values)
        return tuple(str(key) for key in getattr(peeled.node, "entries", {}) or {})

    def _metadata(
        self,
        kind: str,
        inner: Any,
        peeled: _Peeled,
        path: str,
        shape: dict[str, Any] | None,
    ) -> FieldMetadata:
        if kind == "string":
            return StringMetadata()
        if kind == "number":
            return NumberMetadata()
        if kind == "boolean":
            return BooleanMetadata()
        if kind == "date":
            return DateMetadata()
        if kind == "enum":
            return EnumMetadata(values=self._enum_values(peeled))
        if kind == "object":
            children = shape if shape is not None else inner.shape
            return ObjectMetadata(fields=self.fields(children, path))
        if kind == "array":
            element = self.field(
                ARRAY_ELEMENT_NAME, inner.element, f"{path}.{ARRAY_ELEMENT_NAME}"
            )
            return ArrayMetadata(element=element)
        if kind == "tuple":
            return TupleMetadata(
                elements=tuple(
                    self.field(str(index), item, f"{path}.{index}")
                    for index, item in enumerate(inner.items)
                )
            )
        if kind == "record":
            value = self.field(
                RECORD_VALUE_NAME, inner.value_type, f"{path}.{RECORD_VALUE_NAME}"
            )
            return RecordMetadata(value_descriptor=value)
        if kind == "union":
            return self._union(inner, path)
        raise StructuralError(f'No metadata builder for type "{kind}"', path=path)

    def _union(self, node: Any, path: str) -> UnionMetadata:
        discriminator = getattr(node, "discriminator", None)
        variants: list[UnionVariant] = []

        for index, member in enumerate(node.options):
            shape = _object_shape(unwrap_schema(member).inner) if discriminator else None
            if shape is not None:
                tag = self._discriminator_tag(shape.get(discriminator))
                if tag is None:
                    tag = f"variant_{index}"
                    self.warn(
                        f'Field "{path}": union member {index} has no literal '
                        f'"{discriminator}" -- using tag "{tag}"'
                    )
                variants.append(
                    UnionVariant(value=tag, fields=self.fields(shape, f"{path}.{tag}"))
                )
                continue

            option = self.field(f"option_{index}", member, f"{path}.option_{index}")
            variants.append(UnionVariant(value=f"variant_{index}", fields=(option,)))

        return UnionMetadata(discriminator=discriminator, variants=tuple(variants))

    @staticmethod
    def _discriminator_tag(node: Any) -> str | None:
        if node is None:
            return None
        inner = unwrap_schema(node).inner
        if inner.type != "literal":
            return None
        values = tuple(getattr(inner, "values", ()))
        return str(values[0]) if values else None


def _validate_steps(
    steps: Iterable[FormStep | Mapping[str, Any]], field_names: list[str]
) -> tuple[FormStep, ...]:
    known = set(field_names)
    validated: list[FormStep] = []
    for step in steps:
        form_step = step if isinstance(step, FormStep) else FormStep.model_validate(step)
        for name in form_step.fields:
            if name not in known:
                raise StructuralError(
                    f'Step "{form_step.id}" references unknown field "{name}"',
                    code=SCHEMA_UNKNOWN_STEP_FIELD,
                    step=form_step.id,
                    field=name,
                )
        validated.append(form_step)
    return tuple(validated)


def introspect(
    schema: Any,
    form_name: str,
    schema_import_path: str,
    schema_export_name: str,
    steps: Iterable[FormStep | Mapping[str, Any]] | None = None,
) -> FormDescriptor:
    """Introspect an object-rooted schema into a form descriptor.

    Args:
        schema: Root schema node (an object, or an intersection of objects)
        form_name: Name of the generated form component
        schema_import_path: Module the form imports the schema from
        schema_export_name: Exported identifier of the schema
        steps: Optional wizard steps; each names root fields

    Returns:
        The form descriptor, with any degrade warnings attached

    Raises:
        StructuralError: If the root is not object-shaped, a node cannot be
            unwrapped, or a step names a field the schema does not have
    """
    if not is_schema_node(schema):
        raise StructuralError(
            "Schema is not a recognised schema node",
            value_type=type(schema).__name__,
        )
    shape = _object_shape(schema)
    if shape is None:
        raise StructuralError(
            "only object-rooted schemas are supported", root_type=schema.type
        )

    walker = _Introspector()
    fields = walker.fields(shape, None)
    form_steps = None
    if steps is not None:
        form_steps = _validate_steps(steps, [f.name for f in fields])

    logger.debug(
        "Introspected schema",
        form=form_name,
        fields=len(fields),
        warnings=len(walker.warnings),
    )
    return FormDescriptor(
        name=form_name,
        fields=fields,
        schema_import_path=schema_import_path,
        schema_export_name=schema_export_name,
        warnings=tuple(walker.warnings),
        steps=form_steps,
    )
