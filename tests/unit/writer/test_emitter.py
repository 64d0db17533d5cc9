"""Tests for Zod expression emission."""

from __future__ import annotations

from typing import Any

import pytest

from formsmith.introspection import introspect
from formsmith.schema import z
from formsmith.writer import emit_field
from formsmith.writer.emitter import regex_literal


def _field(node: Any) -> Any:
    form = introspect(
        z.object({"f": node}),
        form_name="F",
        schema_import_path="./s",
        schema_export_name="sSchema",
    )
    return form.fields[0]


class TestScalars:
    """Tests for scalar expressions and constraint chains."""

    def test_string_chain(self, make_field: Any) -> None:
        """Test string constraints in a fixed order."""
        field = make_field("s", min_length=1, max_length=5, pattern="^a/b$")

        assert emit_field(field) == "z.string().min(1).max(5).regex(/^a\\/b$/)"

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            ("email", "z.email()"),
            ("url", "z.url()"),
            ("uuid", "z.uuid()"),
            ("cuid", "z.cuid()"),
            ("datetime", "z.iso.datetime()"),
        ],
    )
    def test_string_formats(self, make_field: Any, fmt: str, expected: str) -> None:
        """Test formats pick the top-level builder."""
        assert emit_field(make_field("s", format=fmt)) == expected

    def test_number_chain(self, make_field: Any) -> None:
        """Test number constraints in a fixed order."""
        field = make_field("n", "number", is_int=True, min=0, max=10, step=2)

        assert emit_field(field) == "z.number().int().min(0).max(10).multipleOf(2)"

    def test_float_bounds(self, make_field: Any) -> None:
        """Test fractional bounds are emitted as written."""
        assert emit_field(make_field("n", "number", min=0.5)) == "z.number().min(0.5)"

    def test_boolean_date_enum(self, make_field: Any, make_enum: Any) -> None:
        """Test the remaining scalar kinds."""
        assert emit_field(make_field("b", "boolean")) == "z.boolean()"
        assert emit_field(make_field("d", "date")) == "z.date()"
        assert emit_field(make_enum("r", "a", "b")) == 'z.enum(["a", "b"])'


class TestWrappers:
    """Tests for nullable, optional and describe wrappers."""

    def test_wrapper_order(self, make_field: Any) -> None:
        """Test nullable comes before optional, describe last."""
        field = make_field("s", is_nullable=True, is_optional=True, description="x")

        assert emit_field(field) == 'z.string().nullable().optional().describe("x")'

    def test_description_escaped(self, make_field: Any) -> None:
        """Test descriptions are emitted as JSON string literals."""
        field = make_field("s", description='say "hi"\n')

        assert emit_field(field) == 'z.string().describe("say \\"hi\\"\\n")'

    def test_schema_ref_is_bare(self, make_field: Any) -> None:
        """Test a referenced schema is emitted by name only."""
        field = make_field(
            "address",
            "object",
            metadata={"kind": "object", "fields": ()},
            schema_ref="addressSchema",
            is_optional=True,
            description="ignored",
        )

        assert emit_field(field) == "addressSchema"


class TestComposites:
    """Tests for composite expressions."""

    def test_array(self) -> None:
        """Test element expression and item bounds."""
        field = _field(z.array(z.string().min(2)).min(1).max(3))

        assert emit_field(field) == "z.array(z.string().min(2)).min(1).max(3)"

    def test_tuple(self) -> None:
        """Test tuple elements in order."""
        field = _field(z.tuple([z.number(), z.boolean()]))

        assert emit_field(field) == "z.tuple([z.number(), z.boolean()])"

    def test_object_keys(self) -> None:
        """Test non-identifier keys are quoted."""
        field = _field(z.object({"first-name": z.string(), "ok": z.boolean()}))

        assert emit_field(field) == 'z.object({ "first-name": z.string(), ok: z.boolean() })'

    def test_empty_object(self) -> None:
        """Test an object with no fields."""
        assert emit_field(_field(z.object({}))) == "z.object({})"

    def test_record(self) -> None:
        """Test records are keyed by string."""
        field = _field(z.record(z.string(), z.number()))

        assert emit_field(field) == "z.record(z.string(), z.number())"

    def test_discriminated_union(self, nested_schema: Any) -> None:
        """Test the discriminator is rebuilt as a literal per variant."""
        form = introspect(
            nested_schema,
            form_name="F",
            schema_import_path="./s",
            schema_export_name="sSchema",
        )
        payment = next(f for f in form.fields if f.name == "payment")

        assert emit_field(payment) == (
            'z.discriminatedUnion("method", ['
            'z.object({ method: z.literal("card"), cardNumber: z.string() }), '
            'z.object({ method: z.literal("bank"), iban: z.string() })])'
        )

    def test_plain_union_unwraps_options(self) -> None:
        """Test synthetic single-option variants collapse to their member."""
        field = _field(z.union([z.string(), z.number()]).optional())

        assert emit_field(field) == "z.union([z.string(), z.number()]).optional()"


class TestRegexLiteral:
    """Tests for regex literal rendering."""

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("^abc$", "/^abc$/"),
            ("a/b", "/a\\/b/"),
            ("a\\/b", "/a\\/b/"),
            ("\\d+/\\w", "/\\d+\\/\\w/"),
            ("a\nb", "/a\\nb/"),
        ],
    )
    def test_regex_literal(self, pattern: str, expected: str) -> None:
        """Test bare slashes and newlines are escaped, escapes kept."""
        assert regex_literal(pattern) == expected
