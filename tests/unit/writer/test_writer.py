"""Tests for Zod module writing and dependency ordering."""

from __future__ import annotations

from typing import Any

import pytest

from formsmith.config import GeneratorSettings
from formsmith.introspection import FormDescriptor, introspect
from formsmith.schema import z
from formsmith.writer import (
    CircularReferenceError,
    DuplicateSchemaError,
    EmbeddedSchema,
    collect_schema_refs,
    topological_sort,
    write_schema,
)
from formsmith.writer.errors import WRITER_CIRCULAR_REFERENCE, WRITER_DUPLICATE_SCHEMA


@pytest.fixture
def ref_field(make_field: Any) -> Any:
    """Factory for object fields pointing at a named schema."""

    def factory(name: str, ref: str) -> Any:
        return make_field(
            name, "object", metadata={"kind": "object", "fields": ()}, schema_ref=ref
        )

    return factory


def _form(export_name: str, *fields: Any) -> FormDescriptor:
    return FormDescriptor(
        name="F",
        fields=fields,
        schema_import_path="./schemas",
        schema_export_name=export_name,
    )


class TestWriteSchema:
    """Tests for the emitted module."""

    def test_single_schema(self, settings: GeneratorSettings) -> None:
        """Test the import line, declaration and inferred type."""
        form = introspect(
            z.object({"name": z.string(), "age": z.number().optional()}),
            form_name="F",
            schema_import_path="./s",
            schema_export_name="userSchema",
        )

        result = write_schema(form, settings=settings)

        assert result.code == (
            'import { z } from "zod/v4";\n'
            "\n"
            "export const userSchema = z.object({\n"
            "  name: z.string(),\n"
            "  age: z.number().optional(),\n"
            "});\n"
            "\n"
            "export type User = z.infer<typeof userSchema>;\n"
        )
        assert result.warnings == []

    def test_zod_import_path(self, make_field: Any) -> None:
        """Test the import module comes from settings."""
        settings = GeneratorSettings(_env_file=None, zod_import_path="zod")

        code = write_schema(_form("aSchema", make_field("a")), settings=settings).code

        assert code.startswith('import { z } from "zod";\n')

    def test_quoted_root_keys(self, make_field: Any, settings: GeneratorSettings) -> None:
        """Test root keys that are not identifiers are quoted."""
        code = write_schema(_form("aSchema", make_field("first name")), settings=settings).code

        assert '  "first name": z.string(),' in code

    def test_embedded_dependencies_first(
        self, make_field: Any, ref_field: Any, settings: GeneratorSettings
    ) -> None:
        """Test embedded schemas precede the schemas that use them."""
        address = _form("addressSchema", make_field("street"))
        contact = _form("contactSchema", make_field("name"), ref_field("address", "addressSchema"))
        primary = _form("orderSchema", ref_field("owner", "contactSchema"))

        code = write_schema(
            primary,
            [EmbeddedSchema(form=contact), EmbeddedSchema(form=address)],
            settings=settings,
        ).code

        assert (
            code.index("export const addressSchema")
            < code.index("export const contactSchema")
            < code.index("export const orderSchema")
        )
        assert "  address: addressSchema," in code
        assert "  owner: contactSchema," in code
        assert "export type Contact = z.infer<typeof contactSchema>;" in code
        assert code.count('import { z } from "zod/v4";') == 1

    def test_cycle_raises(self, ref_field: Any, settings: GeneratorSettings) -> None:
        """Test a reference cycle aborts the write."""
        a = _form("aSchema", ref_field("b", "bSchema"))
        b = _form("bSchema", ref_field("a", "aSchema"))

        with pytest.raises(CircularReferenceError) as exc_info:
            write_schema(_form("rootSchema"), [EmbeddedSchema(form=a), EmbeddedSchema(form=b)])

        assert exc_info.value.code == WRITER_CIRCULAR_REFERENCE
        assert exc_info.value.context["schemas"] == ["aSchema", "bSchema"]
        assert "directed acyclic graph" in exc_info.value.message

    def test_duplicate_embedded_names_raise(
        self, make_field: Any, settings: GeneratorSettings
    ) -> None:
        """Test two embedded schemas with one export name abort the write."""
        first = _form("aSchema", make_field("x"))
        second = _form("aSchema", make_field("y"))

        with pytest.raises(DuplicateSchemaError) as exc_info:
            write_schema(
                _form("rootSchema", make_field("z")),
                [EmbeddedSchema(form=first), EmbeddedSchema(form=second)],
                settings=settings,
            )

        assert exc_info.value.code == WRITER_DUPLICATE_SCHEMA
        assert exc_info.value.context["names"] == ["aSchema"]

    def test_embedded_name_clashes_with_primary(
        self, make_field: Any, settings: GeneratorSettings
    ) -> None:
        """Test an embedded schema cannot reuse the primary export name."""
        embedded = _form("rootSchema", make_field("x"))

        with pytest.raises(DuplicateSchemaError) as exc_info:
            write_schema(
                _form("rootSchema", make_field("y")),
                [EmbeddedSchema(form=embedded)],
                settings=settings,
            )

        assert exc_info.value.context["names"] == ["rootSchema"]


class TestSchemaRefs:
    """Tests for reference collection."""

    def test_nested_refs(self, make_field: Any, ref_field: Any) -> None:
        """Test references inside arrays and objects are found."""
        listing = make_field(
            "items",
            "array",
            metadata={"kind": "array", "element": ref_field("item", "itemSchema")},
        )
        group = make_field(
            "group",
            "object",
            metadata={"kind": "object", "fields": (ref_field("lead", "personSchema"),)},
        )

        refs = collect_schema_refs(_form("rootSchema", listing, group, make_field("x")))

        assert refs == {"itemSchema", "personSchema"}

    def test_no_refs(self, user_schema: Any) -> None:
        """Test a self-contained schema has no references."""
        form = introspect(
            user_schema,
            form_name="F",
            schema_import_path="./s",
            schema_export_name="sSchema",
        )

        assert collect_schema_refs(form) == set()


class TestTopologicalSort:
    """Tests for dependency ordering."""

    def test_ties_keep_input_order(self, make_field: Any) -> None:
        """Test independent schemas stay in the order given."""
        schemas = [
            EmbeddedSchema(form=_form(name, make_field("x")))
            for name in ("cSchema", "aSchema", "bSchema")
        ]

        assert [s.name for s in topological_sort(schemas)] == ["cSchema", "aSchema", "bSchema"]

    def test_chain(self, ref_field: Any, make_field: Any) -> None:
        """Test a chain is ordered dependencies first."""
        schemas = [
            EmbeddedSchema(form=_form("topSchema", ref_field("m", "midSchema"))),
            EmbeddedSchema(form=_form("midSchema", ref_field("b", "baseSchema"))),
            EmbeddedSchema(form=_form("baseSchema", make_field("x"))),
        ]

        ordered = [s.name for s in topological_sort(schemas)]

        assert ordered == ["baseSchema", "midSchema", "topSchema"]

    def test_external_and_self_refs_ignored(self, ref_field: Any) -> None:
        """Test refs outside the set and self refs add no edges."""
        schemas = [
            EmbeddedSchema(form=_form("treeSchema", ref_field("child", "treeSchema"))),
            EmbeddedSchema(form=_form("leafSchema", ref_field("ext", "elsewhereSchema"))),
        ]

        assert [s.name for s in topological_sort(schemas)] == ["treeSchema", "leafSchema"]

    def test_cycle_names_members(self, ref_field: Any, make_field: Any) -> None:
        """Test only schemas left in the cycle are reported."""
        schemas = [
            EmbeddedSchema(form=_form("freeSchema", make_field("x"))),
            EmbeddedSchema(form=_form("xSchema", ref_field("y", "ySchema"))),
            EmbeddedSchema(form=_form("ySchema", ref_field("z", "zSchema"))),
            EmbeddedSchema(form=_form("zSchema", ref_field("x", "xSchema"))),
        ]

        with pytest.raises(CircularReferenceError) as exc_info:
            topological_sort(schemas)

        assert exc_info.value.context["schemas"] == ["xSchema", "ySchema", "zSchema"]

    def test_duplicates_rejected(self, make_field: Any) -> None:
        """Test duplicate names are reported instead of collapsed."""
        schemas = [
            EmbeddedSchema(form=_form("aSchema", make_field("x"))),
            EmbeddedSchema(form=_form("bSchema", make_field("x"))),
            EmbeddedSchema(form=_form("aSchema", make_field("y"))),
        ]

        with pytest.raises(DuplicateSchemaError) as exc_info:
            topological_sort(schemas)

        assert str(exc_info.value) == (
            "WRITER_DUPLICATE_SCHEMA: Duplicate schema export names: aSchema"
        )

    def test_empty(self) -> None:
        """Test no schemas sort to nothing."""
        assert topological_sort([]) == []
