# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Field markup.

Turns a resolved ``ComponentConfig`` into TSX bound to a ``@tanstack/react-form``
instance named ``form``. Paths thread through composites so every nested
control binds to its own slice of form state: ``address.street`` for objects,
and template-literal paths such as ``items[${i}].name`` inside array rows,
where the row index is only known at runtime.
"""

from __future__ import annotations

from formsmith.codegen.defaults import default_value
from formsmith.codegen.errors import EmissionPreconditionError
from formsmith.codegen.escaping import (
    escape_attribute,
    escape_template,
    escape_text,
    indent,
    js_literal,
    member_access,
)
from formsmith.introspection.labels import format_option_label, name_to_label
from formsmith.introspection.types import FieldDescriptor, FieldType
from formsmith.mapping.types import (
    ComponentConfig,
    ComponentProps,
    ComponentType,
    FieldProps,
)

ROW_INDEX = "${i}"
RECORD_KEY_NAME = "value"

_INPUT_PROPS = (
    ("type", "type"),
    ("min", "min"),
    ("max", "max"),
    ("step", "step"),
    ("min_length", "minLength"),
    ("max_length", "maxLength"),
    ("pattern", "pattern"),
)
_TEXTAREA_PROPS = (("max_length", "maxLength"),)

_REMOVE_BUTTON = (
    '<Button type="button" variant="outline" size="sm" '
    "onClick={() => arrayField.removeValue(i)}>Remove</Button>"
)


def field_markup(
    descriptor: FieldDescriptor,
    config: ComponentConfig,
    path: str | None = None,
) -> str:
    """Render one field, recursing into composites.

    Args:
        descriptor: The field being rendered
        config: Its resolved component config
        path: Dotted state path; defaults to the field name

    Raises:
        EmissionPreconditionError: If a choice control has no options
    """
    path = descriptor.name if path is None else path
    component = config.component
    if component is ComponentType.FIELDSET:
        return _fieldset(descriptor, config, path, template=False)
    if component is ComponentType.FIELD_ARRAY:
        return _field_array(descriptor, config, path)
    if component is ComponentType.UNION_SWITCH:
        return _union_switch(descriptor, config, path)
    return _form_field(descriptor, config, path, template=False)


def _template_markup(
    descriptor: FieldDescriptor, config: ComponentConfig, template_path: str
) -> str:
    """Render a field inside an array row, bound through a template-literal path."""
    component = config.component
    if component is ComponentType.FIELDSET:
        return _fieldset(descriptor, config, template_path, template=True)
    if component is ComponentType.UNION_SWITCH:
        return f"{{/* Union inside array: {descriptor.name} */}}"
    if component is ComponentType.FIELD_ARRAY:
        return f"{{/* Collection inside array: {descriptor.name} */}}"
    return _form_field(descriptor, config, template_path, template=True)


def _chrome(field_props: FieldProps) -> list[str]:
    lines = [f'label="{escape_attribute(field_props.label)}"']
    if field_props.description:
        lines.append(f'description="{escape_attribute(field_props.description)}"')
    if field_props.required:
        lines.append("required")
    return lines


def _form_field(
    descriptor: FieldDescriptor, config: ComponentConfig, path: str, template: bool
) -> str:
    name_attr = f"name={{`{path}`}}" if template else f'name="{escape_attribute(path)}"'
    lines = [
        "<form.Field",
        f"  {name_attr}",
        "  children={(field) => (",
        "    <Field",
        *(f"      {line}" for line in _chrome(config.field_props)),
        "      error={field.state.meta.errors?.[0]}",
        "    >",
        indent(control_markup(descriptor.name, config, path, template), 6),
        "    </Field>",
        "  )}",
        "/>",
    ]
    return "\n".join(lines)


# Controls


def control_markup(
    field_name: str,
    config: ComponentConfig,
    id_path: str | None = None,
    template: bool = False,
) -> str:
    """Render the bare control of a scalar config, bound to ``field``.

    Args:
        field_name: Name reported when the control cannot be rendered
        config: The resolved scalar config
        id_path: State path element ids are derived from; defaults to
            ``field_name``
        template: Whether ``id_path`` is an escaped template-literal body,
            as it is inside array rows and record entries
    """
    component = config.component
    props = config.props
    if component is ComponentType.INPUT:
        return _input(props)
    if component is ComponentType.TEXTAREA:
        return _textarea(props)
    if component is ComponentType.CHECKBOX:
        return "\n".join(
            [
                "<Checkbox",
                "  checked={field.state.value ?? false}",
                "  onCheckedChange={(checked) => field.handleChange(checked)}",
                "/>",
            ]
        )
    if component is ComponentType.SELECT:
        return _select(_require_options(component, props, field_name))
    if component is ComponentType.RADIO_GROUP:
        options = _require_options(component, props, field_name)
        return _radio_group(options, field_name if id_path is None else id_path, template)
    if component is ComponentType.SLIDER:
        return _slider(props)
    if component is ComponentType.DATE_PICKER:
        return "\n".join(
            [
                "<DatePicker",
                "  value={field.state.value}",
                "  onValueChange={field.handleChange}",
                "/>",
            ]
        )
    return f"{{/* Unsupported component: {component.value} */}}"


def _prop_lines(props: ComponentProps, keys: tuple[tuple[str, str], ...]) -> list[str]:
    lines = []
    for key, attribute in keys:
        value = getattr(props, key, None)
        if value is None:
            continue
        if isinstance(value, str):
            lines.append(f'  {attribute}="{escape_attribute(value)}"')
        else:
            lines.append(f"  {attribute}={{{js_literal(value)}}}")
    return lines


def _input(props: ComponentProps) -> str:
    change = "e.target.valueAsNumber" if props.type == "number" else "e.target.value"
    lines = [
        "<Input",
        *_prop_lines(props, _INPUT_PROPS),
        '  value={field.state.value ?? ""}',
        f"  onChange={{(e) => field.handleChange({change})}}",
        "  onBlur={field.handleBlur}",
        "/>",
    ]
    return "\n".join(lines)


def _textarea(props: ComponentProps) -> str:
    lines = [
        "<Textarea",
        *_prop_lines(props, _TEXTAREA_PROPS),
        '  value={field.state.value ?? ""}',
        "  onChange={(e) => field.handleChange(e.target.value)}",
        "  onBlur={field.handleBlur}",
        "/>",
    ]
    return "\n".join(lines)


def _require_options(
    component: ComponentType, props: ComponentProps, field_name: str
) -> tuple[str, ...]:
    if not props.options:
        raise EmissionPreconditionError(
            f"{component.value} component requires a non-empty options array",
            component=component.value,
            field_name=field_name,
        )
    return props.options


def _select(options: tuple[str, ...] | list[str]) -> str:
    items = [
        f'    <Select.Item value="{escape_attribute(option)}">'
        f"{escape_text(format_option_label(option))}</Select.Item>"
        for option in options
    ]
    lines = [
        "<Select value={field.state.value} onValueChange={field.handleChange}>",
        "  <Select.Trigger>",
        '    <Select.Value placeholder="Select..." />',
        "  </Select.Trigger>",
        "  <Select.Content>",
        *items,
        "  </Select.Content>",
        "</Select>",
    ]
    return "\n".join(lines)


def _radio_group(options: tuple[str, ...], id_path: str, template: bool) -> str:
    lines = ["<RadioGroup value={field.state.value} onValueChange={field.handleChange}>"]
    for option in options:
        # Row paths carry the runtime index, so each row gets its own ids
        if template:
            item_id = f"{{`{id_path}-{escape_template(option)}`}}"
        else:
            item_id = f'"{escape_attribute(f"{id_path}-{option}")}"'
        lines.extend(
            [
                '  <div className="flex items-center gap-2">',
                f'    <RadioGroup.Item value="{escape_attribute(option)}" id={item_id} />',
                f"    <Label htmlFor={item_id}>"
                f"{escape_text(format_option_label(option))}</Label>",
                "  </div>",
            ]
        )
    lines.append("</RadioGroup>")
    return "\n".join(lines)


def _slider(props: ComponentProps) -> str:
    low = js_literal(props.min if props.min is not None else 0)
    high = js_literal(props.max if props.max is not None else 100)
    step = js_literal(props.step if props.step is not None else 1)
    lines = [
        "<Slider",
        f"  value={{[field.state.value ?? {low}]}}",
        "  onValueChange={([v]) => field.handleChange(v)}",
        f"  min={{{low}}}",
        f"  max={{{high}}}",
        f"  step={{{step}}}",
        "/>",
    ]
    return "\n".join(lines)


# Composites


def _card(title: str, body: list[str]) -> str:
    lines = [
        "<Card>",
        "  <CardHeader>",
        f"    <CardTitle>{escape_text(title)}</CardTitle>",
        "  </CardHeader>",
        '  <CardContent className="flex flex-col gap-3">',
        *body,
        "  </CardContent>",
        "</Card>",
    ]
    return "\n".join(lines)


def _fieldset(
    descriptor: FieldDescriptor, config: ComponentConfig, path: str, template: bool
) -> str:
    child_configs = config.props.child_configs
    child_fields = config.props.child_fields
    if child_configs is None or child_fields is None:
        return f"{{/* {descriptor.name}: no child configs */}}"

    children = []
    for child in child_fields:
        child_config = child_configs.get(child.name)
        if child_config is None:
            continue
        if template:
            markup = _template_markup(
                child, child_config, f"{path}.{escape_template(child.name)}"
            )
        else:
            markup = field_markup(child, child_config, f"{path}.{child.name}")
        children.append(indent(markup, 2))

    return _card(config.field_props.label, ["\n\n".join(children)] if children else [])


def _field_array(descriptor: FieldDescriptor, config: ComponentConfig, path: str) -> str:
    element_config = config.props.element_config
    element_field = config.props.element_field
    if element_config is None or element_field is None:
        return f"{{/* {descriptor.name}: no element config */}}"

    if descriptor.type == FieldType.RECORD:
        return _record(config, element_config, path)
    if element_config.component is ComponentType.FIELDSET:
        return _array_of_objects(config, element_config, element_field, path)
    if element_field.type == FieldType.UNION:
        return _array_of_unions(config, element_config, path)
    if element_config.component.is_composite:
        return f"{{/* {descriptor.name}: nested collections are not editable inline */}}"
    return _simple_array(config, element_config, element_field, path)


def _array_card(label: str, path: str, rows: list[str], add_button: str) -> str:
    lines = [
        f'<form.Field name="{escape_attribute(path)}" mode="array">',
        "  {(arrayField) => (",
        "    <Card>",
        "      <CardHeader>",
        f"        <CardTitle>{escape_text(label)}</CardTitle>",
        "      </CardHeader>",
        '      <CardContent className="flex flex-col gap-3">',
        *rows,
        f"        {add_button}",
        "      </CardContent>",
        "    </Card>",
        "  )}",
        "</form.Field>",
    ]
    return "\n".join(lines)


def _add_button(label: str, value: str) -> str:
    return (
        '<Button type="button" variant="outline" '
        f"onClick={{() => arrayField.pushValue({value})}}>Add {escape_text(label)}</Button>"
    )


def _simple_array(
    config: ComponentConfig,
    element_config: ComponentConfig,
    element_field: FieldDescriptor,
    path: str,
) -> str:
    label = config.field_props.label
    row_path = f"{escape_template(path)}[{ROW_INDEX}]"
    rows = [
        "        {(arrayField.state.value ?? []).map((_, i) => (",
        '          <div key={i} className="flex items-center gap-2">',
        "            <form.Field",
        f"              name={{`{row_path}`}}",
        "              children={(field) => (",
        "                <Field label={`Item ${i + 1}`} error={field.state.meta.errors?.[0]}>",
        indent(control_markup(element_field.name, element_config, row_path, True), 18),
        "                </Field>",
        "              )}",
        "            />",
        f"            {_REMOVE_BUTTON}",
        "          </div>",
        "        ))}",
    ]
    return _array_card(label, path, rows, _add_button(label, default_value(element_field)))


def _array_of_objects(
    config: ComponentConfig,
    element_config: ComponentConfig,
    element_field: FieldDescriptor,
    path: str,
) -> str:
    child_configs = element_config.props.child_configs
    child_fields = element_config.props.child_fields
    if child_configs is None or child_fields is None:
        return f"{{/* {path}: no child configs for array element */}}"

    row_path = f"{escape_template(path)}[{ROW_INDEX}]"
    children = [
        indent(
            _template_markup(
                child,
                child_configs[child.name],
                f"{row_path}.{escape_template(child.name)}",
            ),
            14,
        )
        for child in child_fields
        if child.name in child_configs
    ]
    element_label = element_field.label
    rows = [
        "        {(arrayField.state.value ?? []).map((_, i) => (",
        "          <Card key={i}>",
        '            <CardHeader className="flex flex-row items-center justify-between">',
        f"              <CardTitle>{escape_text(element_label)} {{i + 1}}</CardTitle>",
        f"              {_REMOVE_BUTTON}",
        "            </CardHeader>",
        '            <CardContent className="flex flex-col gap-3">',
        *(["\n\n".join(children)] if children else []),
        "            </CardContent>",
        "          </Card>",
        "        ))}",
    ]
    return _array_card(
        config.field_props.label, path, rows, _add_button(element_label, "{}")
    )


def _discriminator_field(name_attr: str, discriminator: str, options: list[str]) -> str:
    lines = [
        "<form.Field",
        f"  {name_attr}",
        "  children={(field) => (",
        f'    <Field label="{escape_attribute(name_to_label(discriminator))}" required>',
        indent(_select(options), 6),
        "    </Field>",
        "  )}",
        "/>",
    ]
    return "\n".join(lines)


def _array_of_unions(
    config: ComponentConfig, element_config: ComponentConfig, path: str
) -> str:
    variants = element_config.props.variant_configs
    discriminator = element_config.props.discriminator
    if not variants or not discriminator:
        return f"{{/* {path}: no variant configs for array of unions */}}"

    row_path = f"{escape_template(path)}[{ROW_INDEX}]"
    blocks = []
    for variant in variants:
        markups = [
            indent(
                _template_markup(
                    field,
                    variant.configs[field.name],
                    f"{row_path}.{escape_template(field.name)}",
                ),
                4,
            )
            for field in variant.fields
            if field.name != discriminator and field.name in variant.configs
        ]
        block = [
            f"{{{member_access('item', [discriminator])} === "
            f'{js_literal(variant.value)} && (',
            '  <div className="flex flex-col gap-3">',
            *(["\n\n".join(markups)] if markups else []),
            "  </div>",
            ")}",
        ]
        blocks.append(indent("\n".join(block), 14))

    selector = _discriminator_field(
        f"name={{`{row_path}.{escape_template(discriminator)}`}}",
        discriminator,
        [variant.value for variant in variants],
    )
    rows = [
        "        {(arrayField.state.value ?? []).map((item, i) => (",
        "          <Card key={i}>",
        '            <CardHeader className="flex flex-row items-center justify-between">',
        "              <CardTitle>Item {i + 1}</CardTitle>",
        f"              {_REMOVE_BUTTON}",
        "            </CardHeader>",
        '            <CardContent className="flex flex-col gap-3">',
        indent(selector, 14),
        "\n\n".join(blocks),
        "            </CardContent>",
        "          </Card>",
        "        ))}",
    ]
    return _array_card(config.field_props.label, path, rows, _add_button("Item", "{}"))


def _record(config: ComponentConfig, value_config: ComponentConfig, path: str) -> str:
    if value_config.component.is_composite:
        control = "\n".join(
            [
                "<Input",
                '  value={field.state.value ?? ""}',
                "  onChange={(e) => field.handleChange(e.target.value)}",
                "  onBlur={field.handleBlur}",
                "/>",
            ]
        )
    else:
        entry_path = f"{escape_template(path)}.${{key}}"
        control = control_markup(RECORD_KEY_NAME, value_config, entry_path, True)
    lines = [
        f'<form.Field name="{escape_attribute(path)}">',
        "  {(recordField) => (",
        "    <Card>",
        "      <CardHeader>",
        f"        <CardTitle>{escape_text(config.field_props.label)}</CardTitle>",
        "      </CardHeader>",
        '      <CardContent className="flex flex-col gap-3">',
        "        {Object.entries(recordField.state.value ?? {}).map(([key]) => (",
        '          <div key={key} className="flex items-center gap-2">',
        '            <span className="text-sm min-w-24">{key}</span>',
        "            <form.Field",
        f"              name={{`{escape_template(path)}.${{key}}`}}",
        "              children={(field) => (",
        indent(control, 16),
        "              )}",
        "            />",
        "          </div>",
        "        ))}",
        "      </CardContent>",
        "    </Card>",
        "  )}",
        "</form.Field>",
    ]
    return "\n".join(lines)


def _union_switch(descriptor: FieldDescriptor, config: ComponentConfig, path: str) -> str:
    discriminator = config.props.discriminator
    variants = config.props.variant_configs
    if not discriminator or not variants:
        return f"{{/* {descriptor.name}: no union config */}}"

    selected = member_access("state.values", [*path.split("."), discriminator])
    blocks = []
    for variant in variants:
        markups = [
            indent(
                field_markup(field, variant.configs[field.name], f"{path}.{field.name}"),
                6,
            )
            for field in variant.fields
            if field.name != discriminator and field.name in variant.configs
        ]
        block = [
            f"<form.Subscribe selector={{(state) => {selected}}}>",
            f"  {{(value) => value === {js_literal(variant.value)} && (",
            '    <div className="flex flex-col gap-3">',
            *(["\n\n".join(markups)] if markups else []),
            "    </div>",
            "  )}",
            "</form.Subscribe>",
        ]
        blocks.append(indent("\n".join(block), 4))

    selector = _discriminator_field(
        f'name="{escape_attribute(f"{path}.{discriminator}")}"',
        discriminator,
        [variant.value for variant in variants],
    )
    return _card(
        config.field_props.label,
        [indent(selector, 4), "\n\n".join(blocks)],
    )
