"""Top-level pytest configuration for formsmith."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

import pytest

# Import subsystem error modules for their side effects so the registry is populated
import formsmith.codegen.errors
import formsmith.config.errors
import formsmith.introspection.errors
import formsmith.mapping.errors
import formsmith.schema.errors
import formsmith.writer.errors
from formsmith.config import GeneratorSettings
from formsmith.introspection import FieldDescriptor, FieldType
from formsmith.schema import z

FieldFactory = Callable[..., FieldDescriptor]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment settings from the outer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("FORMSMITH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> GeneratorSettings:
    """Generator settings with the default import paths."""
    return GeneratorSettings(_env_file=None)


@pytest.fixture
def make_field() -> FieldFactory:
    """Factory for field descriptors.

    ``make_field("age", "number", min=0, max=10)`` puts the extra keyword
    arguments into the constraints.
    """

    def factory(
        name: str,
        type: FieldType | str = FieldType.STRING,
        *,
        metadata: dict[str, Any] | None = None,
        is_optional: bool = False,
        is_nullable: bool = False,
        description: str | None = None,
        schema_ref: str | None = None,
        **constraints: Any,
    ) -> FieldDescriptor:
        return FieldDescriptor(
            name=name,
            type=FieldType(type),
            metadata=metadata,
            is_optional=is_optional,
            is_nullable=is_nullable,
            description=description,
            schema_ref=schema_ref,
            constraints=constraints,
        )

    return factory


@pytest.fixture
def make_enum(make_field: FieldFactory) -> Callable[..., FieldDescriptor]:
    """Factory for enum descriptors."""

    def factory(name: str, *values: str, **kwargs: Any) -> FieldDescriptor:
        return make_field(
            name, FieldType.ENUM, metadata={"kind": "enum", "values": values}, **kwargs
        )

    return factory


@pytest.fixture
def user_schema() -> Any:
    """A representative object schema touching most field kinds."""
    return z.object(
        {
            "firstName": z.string().min(1).max(50),
            "email": z.email(),
            "age": z.number().int().min(0).max(120),
            "bio": z.string().max(500).optional(),
            "isActive": z.boolean(),
            "role": z.enum(["admin", "editor", "viewer"]),
            "birthday": z.date().nullable(),
        }
    )


@pytest.fixture
def nested_schema() -> Any:
    """An object schema with nested composites."""
    return z.object(
        {
            "name": z.string(),
            "address": z.object({"street": z.string(), "city": z.string()}),
            "tags": z.array(z.string()),
            "contacts": z.array(z.object({"label": z.string(), "phone": z.string()})),
            "point": z.tuple([z.number(), z.number()]),
            "metadata": z.record(z.string(), z.string()),
            "payment": z.discriminated_union(
                "method",
                [
                    z.object({"method": z.literal("card"), "cardNumber": z.string()}),
                    z.object({"method": z.literal("bank"), "iban": z.string()}),
                ],
            ),
        }
    )
