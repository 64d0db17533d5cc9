# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Form file layout.

Assembles the complete ``.tsx`` module around the per-field markup: the
import block, the props interface, the ``useForm`` call with its default
values and either a single-step body or a wizard with a step indicator and
per-step validation.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping

from formsmith.codegen.defaults import default_values
from formsmith.codegen.escaping import indent
from formsmith.codegen.fields import field_markup
from formsmith.config import GeneratorSettings
from formsmith.introspection.types import FieldDescriptor, FormDescriptor, FormStep
from formsmith.mapping.types import ComponentConfig, ComponentType

_SCHEMA_SUFFIX = re.compile(r"Schema$", re.IGNORECASE)
_CARD_FAMILY = ("Card", "CardContent", "CardHeader", "CardTitle")

_SUBMIT_HANDLER = """\
    <form
      onSubmit={(e) => {
        e.preventDefault();
        e.stopPropagation();
        form.handleSubmit();
      }}
      className="flex flex-col gap-4"
    >"""

_STEP_INDICATOR = """\
      {/* Step indicator */}
      <div className="flex items-center gap-2" role="tablist" aria-label="Form steps">
        {STEPS.map((step, i) => (
          <div key={step.id} className="flex items-center gap-2" role="tab" aria-selected={i === currentStep}>
            <div className={`flex h-8 w-8 items-center justify-center rounded-full text-sm font-medium ${i === currentStep ? "bg-gray-900 text-white dark:bg-gray-50 dark:text-gray-900" : i < currentStep ? "bg-gray-200 text-gray-700 dark:bg-gray-700 dark:text-gray-200" : "bg-gray-100 text-gray-400 dark:bg-gray-800 dark:text-gray-500"}`}>
              {i + 1}
            </div>
            <span className={`text-sm ${i === currentStep ? "font-medium" : "text-gray-500"}`}>{step.label}</span>
            {i < STEPS.length - 1 && <div className="h-px w-8 bg-gray-200 dark:bg-gray-700" />}
          </div>
        ))}
      </div>"""

_HANDLE_NEXT = """\
  async function handleNext() {
    const stepFields = STEPS[currentStep].fields;
    let hasErrors = false;
    for (const fieldName of stepFields) {
      await form.validateField(fieldName, 'change');
      if (form.getFieldMeta(fieldName)?.errors?.length) {
        hasErrors = true;
      }
    }
    if (!hasErrors) {
      setCurrentStep((s) => s + 1);
    }
  }"""

_NAVIGATION = """\
      {/* Navigation */}
      <div className="flex justify-between">
        {currentStep > 0 && (
          <Button type="button" variant="outline" onClick={() => setCurrentStep((s) => s - 1)}>Back</Button>
        )}
        {currentStep === 0 && <div />}
        {isLastStep ? (
          <Button type="submit">Submit</Button>
        ) : (
          <Button type="button" onClick={handleNext}>Next</Button>
        )}
      </div>"""


def infer_type_name(schema_export_name: str) -> str:
    """Derive the TypeScript type name from a schema export name.

    ``userSchema`` becomes ``User``; a name that is nothing but the suffix
    falls back to ``Schema``.
    """
    stripped = _SCHEMA_SUFFIX.sub("", schema_export_name)
    if not stripped.strip():
        return "Schema"
    return stripped[0].upper() + stripped[1:]


def collect_components(
    configs: Iterable[ComponentConfig], found: set[ComponentType] | None = None
) -> set[ComponentType]:
    """Every component used by ``configs`` and their nested configs."""
    found = set() if found is None else found
    for config in configs:
        found.add(config.component)
        props = config.props
        if props.child_configs:
            collect_components(props.child_configs.values(), found)
        if props.element_config is not None:
            collect_components((props.element_config,), found)
        for variant in props.variant_configs or ():
            collect_components(variant.configs.values(), found)
    return found


def ui_primitives(components: set[ComponentType], wizard: bool = False) -> list[str]:
    """Sorted UI names to import for the given components."""
    names = {"Button", "Field"}
    names.update(c.value for c in components if not c.is_composite)
    if ComponentType.RADIO_GROUP in components:
        names.add("Label")
    if ComponentType.UNION_SWITCH in components:
        names.add("Select")
    if ComponentType.FIELD_ARRAY in components:
        names.add("Input")
    if wizard or any(c.is_composite for c in components):
        names.update(_CARD_FAMILY)
    return sorted(names)


def _imports(
    form: FormDescriptor,
    primitives: list[str],
    settings: GeneratorSettings,
    wizard: bool,
) -> str:
    lines = []
    if wizard:
        lines.append("import { useState } from 'react';")
    lines.append(f"import {{ useForm }} from '{settings.form_import_path}';")
    names = "\n".join(f"  {name}," for name in primitives)
    lines.append(f"import {{\n{names}\n}} from '{settings.ui_import_path}';")
    type_name = infer_type_name(form.schema_export_name)
    lines.append(
        f"import {{ {form.schema_export_name}, type {type_name} }} "
        f"from '{form.schema_import_path}';"
    )
    return "\n".join(lines)


def _props_interface(form_name: str, type_name: str) -> str:
    return (
        f"interface {form_name}Props {{\n"
        f"  defaultValues?: Partial<{type_name}>;\n"
        f"  onSubmit: (data: {type_name}) => void | Promise<void>;\n"
        "}"
    )


def _use_form(form: FormDescriptor, configs: Mapping[str, ComponentConfig]) -> str:
    return "\n".join(
        [
            "  const form = useForm({",
            "    defaultValues: initialValues ?? {",
            default_values(form.fields, dict(configs)),
            "    },",
            "    validators: {",
            f"      onSubmit: {form.schema_export_name},",
            "    },",
            "    onSubmit: async ({ value }) => {",
            "      await onSubmit(value);",
            "    },",
            "  });",
        ]
    )


def _fields_markup(
    fields: Iterable[FieldDescriptor],
    configs: Mapping[str, ComponentConfig],
    spaces: int,
) -> str:
    return "\n\n".join(
        indent(field_markup(field, configs[field.name]), spaces)
        for field in fields
        if field.name in configs
    )


def _steps_constant(steps: tuple[FormStep, ...]) -> str:
    entries = []
    for step in steps:
        fields = ", ".join(json.dumps(name) for name in step.fields)
        description = (
            f", description: {json.dumps(step.description)}" if step.description else ""
        )
        entries.append(
            f"  {{ id: {json.dumps(step.id)}, label: {json.dumps(step.label)}"
            f"{description}, fields: [{fields}] }},"
        )
    return "const STEPS = [\n" + "\n".join(entries) + "\n];"


def _step_blocks(form: FormDescriptor, configs: Mapping[str, ComponentConfig]) -> str:
    by_name = {field.name: field for field in form.fields}
    blocks = []
    for index, step in enumerate(form.steps or ()):
        fields = [by_name[name] for name in step.fields if name in by_name]
        content = _fields_markup(fields, configs, 12)
        blocks.append(f"          {{currentStep === {index} && (<>\n{content}\n          </>)}}")
    return "\n".join(blocks)


def _head(form: FormDescriptor, imports: str, settings: GeneratorSettings) -> list[str]:
    type_name = infer_type_name(form.schema_export_name)
    head = ["'use client';", ""] if settings.use_client else []
    head.extend([imports, "", _props_interface(form.name, type_name), ""])
    return head


def _signature(form_name: str) -> str:
    return (
        f"export function {form_name}"
        f"({{ defaultValues: initialValues, onSubmit }}: {form_name}Props) {{"
    )


def form_file(
    form: FormDescriptor,
    configs: Mapping[str, ComponentConfig],
    primitives: list[str],
    settings: GeneratorSettings,
) -> str:
    """Render the complete form module.

    Args:
        form: The form descriptor; its fields must all have configs
        configs: Resolved config per root field name
        primitives: UI names to import, from ``ui_primitives``
        settings: Import paths and the ``'use client'`` switch

    Returns:
        The ``.tsx`` source, ending with a newline
    """
    if form.steps:
        return _wizard_file(form, configs, primitives, settings)

    lines = _head(form, _imports(form, primitives, settings, wizard=False), settings)
    lines.extend(
        [
            _signature(form.name),
            _use_form(form, configs),
            "",
            "  return (",
            _SUBMIT_HANDLER,
            _fields_markup(form.fields, configs, 6),
            "",
            '      <Button type="submit">Submit</Button>',
            "    </form>",
            "  );",
            "}",
            "",
        ]
    )
    return "\n".join(lines)


def _wizard_file(
    form: FormDescriptor,
    configs: Mapping[str, ComponentConfig],
    primitives: list[str],
    settings: GeneratorSettings,
) -> str:
    lines = _head(form, _imports(form, primitives, settings, wizard=True), settings)
    lines.extend(
        [
            _steps_constant(form.steps or ()),
            "",
            _signature(form.name),
            "  const [currentStep, setCurrentStep] = useState(0);",
            "  const isLastStep = currentStep === STEPS.length - 1;",
            "",
            _use_form(form, configs),
            "",
            _HANDLE_NEXT,
            "",
            "  return (",
            _SUBMIT_HANDLER,
            _STEP_INDICATOR,
            "",
            "      {/* Step content */}",
            "      <Card>",
            "        <CardHeader>",
            "          <CardTitle>{STEPS[currentStep].label}</CardTitle>",
            "        </CardHeader>",
            '        <CardContent className="flex flex-col gap-4">',
            _step_blocks(form, configs),
            "        </CardContent>",
            "      </Card>",
            "",
            _NAVIGATION,
            "    </form>",
            "  );",
            "}",
            "",
        ]
    )
    return "\n".join(lines)
