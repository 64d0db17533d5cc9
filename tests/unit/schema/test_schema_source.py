"""Tests for reading schemas back from Zod source text."""

from __future__ import annotations

import pytest

from formsmith.schema import SchemaSourceError, load_schema, load_schema_source
from formsmith.schema.errors import SCHEMA_EXPORT_NOT_FOUND, SCHEMA_SOURCE_ERROR

SOURCE = """\
import { z } from "zod/v4";

/* Shared address block */
export const addressSchema = z.object({
  street: z.string().min(1),
  "zip code": z.string().regex(/^\\d{5}$/),
});

export type Address = z.infer<typeof addressSchema>;

export const userSchema = z.object({
  name: z.string().max(50).describe('Full name'),
  age: z.number().int().min(0).multipleOf(1).optional(),
  role: z.enum(["admin", "user"]),
  address: addressSchema,
  tags: z.array(z.string()).min(1),
  createdAt: z.iso.datetime(),
  kind: z.discriminatedUnion("type", [
    z.object({ type: z.literal("a"), a: z.boolean() }),
    z.object({ type: z.literal("b"), b: z.number().nullable() }),
  ]),
}); // trailing comment

export type User = z.infer<typeof userSchema>;
"""


class TestLoadSchemaSource:
    """Tests for load_schema_source."""

    def test_reads_declarations_in_order(self) -> None:
        """Test every schema declaration is returned, in source order."""
        schemas = load_schema_source(SOURCE)

        assert list(schemas) == ["addressSchema", "userSchema"]

    def test_builds_nodes(self) -> None:
        """Test the chains evaluate to the matching nodes."""
        user = load_schema_source(SOURCE)["userSchema"]
        shape = user.shape

        assert shape["name"].checks[0].maximum == 50
        assert shape["name"].description == "Full name"
        assert shape["age"].type == "optional"
        assert [c.check for c in shape["age"].unwrap().checks] == [
            "number_format",
            "greater_than",
            "multiple_of",
        ]
        assert shape["role"].options == ["admin", "user"]
        assert shape["createdAt"].format == "datetime"
        assert shape["kind"].discriminator == "type"
        assert shape["kind"].options[1].shape["b"].type == "nullable"

    def test_identifiers_resolve_to_earlier_declarations(self) -> None:
        """Test a bound identifier reuses the declared node."""
        schemas = load_schema_source(SOURCE)

        assert schemas["userSchema"].shape["address"] == schemas["addressSchema"]
        assert list(schemas["addressSchema"].shape) == ["street", "zip code"]

    def test_regex_literal(self) -> None:
        """Test regex literals keep their escapes and drop the delimiter escape."""
        source = r'const s = z.object({ p: z.string().regex(/^\/api\/\d+$/i) });'
        node = load_schema(source, "s")

        assert node.shape["p"].checks[0].pattern == r"^/api/\d+$"

    def test_default_export_and_type_annotation(self) -> None:
        """Test export default and annotated declarations."""
        source = (
            "const base: z.ZodObject<any> = z.object({ a: z.string() });\n"
            "export default base;\n"
        )
        schemas = load_schema_source(source)

        assert schemas["default"] == schemas["base"]

    def test_non_schema_declarations_ignored(self) -> None:
        """Test plain values are usable but not returned."""
        source = "const n = 3;\nconst s = z.object({ a: z.string().min(n) });"
        schemas = load_schema_source(source)

        assert list(schemas) == ["s"]
        assert schemas["s"].shape["a"].checks[0].minimum == 3


class TestLoadSchemaErrors:
    """Tests for source reader errors."""

    def test_missing_export(self) -> None:
        """Test asking for an undeclared schema."""
        with pytest.raises(SchemaSourceError) as exc_info:
            load_schema(SOURCE, "orderSchema")

        assert exc_info.value.code == SCHEMA_EXPORT_NOT_FOUND
        assert exc_info.value.context["available"] == ["addressSchema", "userSchema"]

    @pytest.mark.parametrize(
        "source",
        [
            "const s = z.string(",
            "const s = 'unterminated",
            "const s = z.object({ a: z.strin() });",
            "const s = z.string().toString();",
            "const s = fetch('x');",
            "const s = z.string() #",
            "function f() {}",
            "const s = z.enum();",
        ],
    )
    def test_invalid_source(self, source: str) -> None:
        """Test malformed or unsupported source is rejected."""
        with pytest.raises(SchemaSourceError) as exc_info:
            load_schema_source(source)

        assert exc_info.value.code == SCHEMA_SOURCE_ERROR

    def test_error_position(self) -> None:
        """Test errors report the line and column."""
        with pytest.raises(SchemaSourceError) as exc_info:
            load_schema_source("const a = z.string();\nconst b = z.nope();")

        error = exc_info.value
        assert error.line == 2
        assert error.column == 12
        assert "(line 2, column 12)" in error.message
