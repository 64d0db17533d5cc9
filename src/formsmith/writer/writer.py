# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Zod v4 source files from form descriptors.

``write_schema`` emits one import line, then an ``export const`` plus
``export type`` pair for every embedded schema, dependencies first, then the
same pair for the primary schema.
"""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable

from formsmith.codegen.escaping import property_key
from formsmith.codegen.form import infer_type_name
from formsmith.config import GeneratorSettings, get_settings
from formsmith.introspection.types import FieldDescriptor, FormDescriptor
from formsmith.logging import get_logger
from formsmith.writer.emitter import emit_field
from formsmith.writer.errors import CircularReferenceError, DuplicateSchemaError
from formsmith.writer.types import EmbeddedSchema, SchemaWriterResult

logger = get_logger("formsmith.writer")


def write_schema(
    form: FormDescriptor,
    embedded_schemas: Iterable[EmbeddedSchema] | None = None,
    settings: GeneratorSettings | None = None,
) -> SchemaWriterResult:
    """Generate a Zod v4 module for ``form`` and any schemas it embeds.

    Args:
        form: The primary schema
        embedded_schemas: Named schemas referenced through ``schema_ref``
        settings: Supplies the module ``z`` is imported from

    Returns:
        The module source and any warnings

    Raises:
        CircularReferenceError: If the embedded schemas reference each other
            in a cycle; nothing is emitted in that case
        DuplicateSchemaError: If two schemas share an export name
    """
    settings = settings or get_settings()
    ordered = topological_sort(list(embedded_schemas or ()))
    if any(schema.name == form.schema_export_name for schema in ordered):
        raise DuplicateSchemaError([form.schema_export_name])

    lines = [f'import {{ z }} from "{settings.zod_import_path}";', ""]
    for schema in ordered:
        lines.extend(_declaration(schema.form))
        lines.append("")
    lines.extend(_declaration(form))
    lines.append("")

    logger.debug(
        "Wrote schema module",
        schema=form.schema_export_name,
        embedded=[schema.name for schema in ordered],
    )
    return SchemaWriterResult(code="\n".join(lines), warnings=[])


def _declaration(form: FormDescriptor) -> list[str]:
    name = form.schema_export_name
    return [
        f"export const {name} = z.object({{",
        *(f"  {property_key(field.name)}: {emit_field(field)}," for field in form.fields),
        "});",
        "",
        f"export type {infer_type_name(name)} = z.infer<typeof {name}>;",
    ]


def collect_schema_refs(form: FormDescriptor) -> set[str]:
    """Every ``schema_ref`` used anywhere in ``form``, however deeply nested."""
    refs: set[str] = set()
    pending: list[FieldDescriptor] = list(form.fields)
    while pending:
        field = pending.pop()
        if field.schema_ref:
            refs.add(field.schema_ref)
        pending.extend(field.children())
    return refs


def topological_sort(schemas: list[EmbeddedSchema]) -> list[EmbeddedSchema]:
    """Order schemas so each comes after every schema it references.

    Uses Kahn's algorithm; ties keep input order. References to names
    outside ``schemas`` and self references add no edge.

    Raises:
        DuplicateSchemaError: If two schemas share an export name
        CircularReferenceError: If the references contain a cycle
    """
    by_name = {schema.name: schema for schema in schemas}
    if len(by_name) != len(schemas):
        counts = Counter(schema.name for schema in schemas)
        raise DuplicateSchemaError(sorted(name for name, n in counts.items() if n > 1))
    dependents: dict[str, list[str]] = {name: [] for name in by_name}
    in_degree = dict.fromkeys(by_name, 0)

    for schema in schemas:
        for ref in collect_schema_refs(schema.form):
            if ref in by_name and ref != schema.name:
                dependents[ref].append(schema.name)
                in_degree[schema.name] += 1

    queue = deque(name for name in by_name if in_degree[name] == 0)
    ordered: list[EmbeddedSchema] = []
    while queue:
        current = queue.popleft()
        ordered.append(by_name[current])
        for dependent in dependents[current]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(ordered) != len(by_name):
        raise CircularReferenceError(
            schemas=sorted(name for name, degree in in_degree.items() if degree > 0)
        )
    return ordered
