# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Schema-to-form generation entry point."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from formsmith.codegen.form import collect_components, form_file, ui_primitives
from formsmith.config import GeneratorSettings, get_settings
from formsmith.errors import FormsmithError
from formsmith.introspection import FormStep, introspect
from formsmith.logging import get_logger
from formsmith.mapping.resolver import resolve_field
from formsmith.mapping.types import ComponentConfig, MappingRule

logger = get_logger("formsmith.codegen")


class GenerateResult(BaseModel):
    """Output of ``generate``."""

    model_config = ConfigDict(frozen=True)

    code: str
    fields: list[str]
    warnings: list[str]
    primitives: list[str]


def generate(
    schema: Any,
    form_name: str,
    schema_import_path: str,
    schema_export_name: str,
    ui_import_path: str | None = None,
    steps: Iterable[FormStep | Mapping[str, Any]] | None = None,
    rules: Iterable[MappingRule] | None = None,
    settings: GeneratorSettings | None = None,
) -> GenerateResult:
    """Generate a form component from an object-rooted schema.

    A field that cannot be resolved to a component, because no rule matches
    or because a rule fails while building its props, is left out of the form
    and reported in ``warnings``; the rest of the form is still emitted.

    Args:
        schema: Root schema node
        form_name: Name of the exported React component
        schema_import_path: Module the form imports the schema from
        schema_export_name: Exported identifier of the schema
        ui_import_path: Overrides ``settings.ui_import_path``
        steps: Optional wizard steps naming root fields
        rules: Mapping rules or a ``MappingRegistry``; defaults apply if omitted
        settings: Generator settings; loaded from the environment if omitted

    Returns:
        The generated code, the emitted field names, warnings and the UI
        primitives the code imports

    Raises:
        StructuralError: If the schema is not object-rooted or a step names
            an unknown field
        EmissionPreconditionError: If a choice control has no options
    """
    settings = settings or get_settings()
    if ui_import_path is not None:
        settings = settings.model_copy(update={"ui_import_path": ui_import_path})
    table = None if rules is None else tuple(rules)

    form = introspect(
        schema,
        form_name=form_name,
        schema_import_path=schema_import_path,
        schema_export_name=schema_export_name,
        steps=steps,
    )
    warnings = list(form.warnings)

    configs: dict[str, ComponentConfig] = {}
    for field in form.fields:
        try:
            configs[field.name] = resolve_field(field, table)
        except Exception as exc:
            # Custom rules run user code; any failure there costs only this field
            detail = exc.message if isinstance(exc, FormsmithError) else _first_line(exc)
            logger.debug("Excluding field", field=field.name, error=detail)
            warnings.append(f'Field "{field.name}": {detail}; field excluded from the form')

    if len(configs) != len(form.fields):
        kept = tuple(field for field in form.fields if field.name in configs)
        update: dict[str, Any] = {"fields": kept}
        if form.steps:
            update["steps"] = tuple(
                step.model_copy(
                    update={"fields": tuple(n for n in step.fields if n in configs)}
                )
                for step in form.steps
            )
        form = form.model_copy(update=update)

    primitives = ui_primitives(
        collect_components(configs.values()), wizard=bool(form.steps)
    )
    code = form_file(form, configs, primitives, settings)
    logger.debug(
        "Generated form",
        form=form_name,
        fields=len(configs),
        warnings=len(warnings),
    )
    return GenerateResult(
        code=code,
        fields=[field.name for field in form.fields],
        warnings=warnings,
        primitives=primitives,
    )


def _first_line(exc: Exception) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__
