"""Tests for form file layout and the generate entry point."""

from __future__ import annotations

from typing import Any

import pytest

from formsmith.codegen import GenerateResult, generate, infer_type_name
from formsmith.codegen.form import collect_components, ui_primitives
from formsmith.config import GeneratorSettings
from formsmith.introspection import StructuralError, introspect
from formsmith.mapping import ComponentType, MappingRegistry, MappingRule, resolve_field
from formsmith.schema import z

WIZARD_STEPS = [
    {"id": "basics", "label": "Basics", "fields": ["firstName", "email"]},
    {"id": "profile", "label": "Profile", "fields": ["age", "bio", "isActive"]},
    {"id": "access", "label": "Access", "fields": ["role", "birthday"]},
]


def _generate(schema: Any, settings: GeneratorSettings, **kwargs: Any) -> GenerateResult:
    return generate(
        schema,
        form_name="UserForm",
        schema_import_path="./schema",
        schema_export_name="testSchema",
        settings=settings,
        **kwargs,
    )


class TestTypeName:
    """Tests for type name inference."""

    @pytest.mark.parametrize(
        "export_name, expected",
        [
            ("userSchema", "User"),
            ("schema", "Schema"),
            ("Schema", "Schema"),
            ("profileSCHEMA", "Profile"),
            ("person", "Person"),
        ],
    )
    def test_infer_type_name(self, export_name: str, expected: str) -> None:
        """Test the suffix is stripped and the first letter capitalized."""
        assert infer_type_name(export_name) == expected


class TestPrimitives:
    """Tests for UI primitive collection."""

    def test_scalars_only(self) -> None:
        """Test scalar components add no card family."""
        assert ui_primitives({ComponentType.INPUT}) == ["Button", "Field", "Input"]

    def test_wizard_adds_cards(self) -> None:
        """Test wizards always import the card family."""
        names = ui_primitives({ComponentType.CHECKBOX}, wizard=True)

        assert {"Card", "CardContent", "CardHeader", "CardTitle"} <= set(names)

    def test_nested_components_collected(self, nested_schema: Any) -> None:
        """Test components inside composites are found."""
        result = generate(
            nested_schema,
            form_name="NestedForm",
            schema_import_path="./nested",
            schema_export_name="nestedSchema",
        )

        assert "Select" in result.primitives
        assert "Card" in result.primitives
        assert "Fieldset" not in result.primitives
        assert "FieldArray" not in result.primitives
        assert "UnionSwitch" not in result.primitives

    def test_collect_components_recurses(self, nested_schema: Any) -> None:
        """Test variant and element configs are walked."""
        form = introspect(
            nested_schema,
            form_name="F",
            schema_import_path="./s",
            schema_export_name="sSchema",
        )
        found = collect_components(resolve_field(field) for field in form.fields)

        assert ComponentType.UNION_SWITCH in found
        assert ComponentType.FIELD_ARRAY in found
        assert ComponentType.INPUT in found


class TestSingleStep:
    """Tests for single-step form files."""

    def test_header_and_imports(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test the directive, import block and props interface."""
        code = _generate(user_schema, settings).code

        assert code.startswith(
            "'use client';\n\nimport { useForm } from '@tanstack/react-form';"
        )
        assert "} from '@/components/ui';" in code
        assert "import { testSchema, type Test } from './schema';" in code
        assert "interface UserFormProps {" in code
        assert "  defaultValues?: Partial<Test>;" in code
        assert (
            "export function UserForm({ defaultValues: initialValues, onSubmit }: "
            "UserFormProps) {"
        ) in code
        assert "useState" not in code
        assert code.endswith("}\n")

    def test_use_client_disabled(self, user_schema: Any) -> None:
        """Test the directive can be switched off."""
        settings = GeneratorSettings(_env_file=None, use_client=False)

        code = _generate(user_schema, settings).code

        assert code.startswith("import { useForm }")
        assert "'use client'" not in code

    def test_default_values(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test one default per root field and the submit validator."""
        code = _generate(user_schema, settings).code

        for line in (
            '      firstName: "",',
            '      email: "",',
            "      age: 0,",
            "      isActive: false,",
            '      role: "admin",',
            "      birthday: undefined,",
        ):
            assert line + "\n" in code
        assert "      onSubmit: testSchema," in code
        assert "      await onSubmit(value);" in code

    def test_result(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test the emitted field names and primitives."""
        result = _generate(user_schema, settings)

        assert result.fields == [
            "firstName",
            "email",
            "age",
            "bio",
            "isActive",
            "role",
            "birthday",
        ]
        assert result.primitives == [
            "Button",
            "Checkbox",
            "DatePicker",
            "Field",
            "Input",
            "Label",
            "RadioGroup",
            "Textarea",
        ]
        assert result.warnings == []
        assert '      <Button type="submit">Submit</Button>' in result.code

    def test_fields_indented(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test root markup sits inside the form element."""
        code = _generate(user_schema, settings).code

        assert '      <form.Field\n        name="firstName"' in code
        assert code.index('name="firstName"') < code.index('name="birthday"')

    def test_ui_import_override(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test the UI module can be overridden per call."""
        code = _generate(user_schema, settings, ui_import_path="~/ui").code

        assert "} from '~/ui';" in code
        assert "@/components/ui" not in code

    def test_settings_from_environment(
        self, user_schema: Any, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test settings are loaded when none are passed."""
        monkeypatch.setenv("FORMSMITH_FORM_IMPORT_PATH", "my-form-lib")

        result = generate(
            user_schema,
            form_name="UserForm",
            schema_import_path="./schema",
            schema_export_name="testSchema",
        )

        assert "import { useForm } from 'my-form-lib';" in result.code


class TestWizard:
    """Tests for multi-step form files."""

    def test_wizard_layout(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test the steps constant, step state and gated blocks."""
        result = _generate(user_schema, settings, steps=WIZARD_STEPS)
        code = result.code

        assert "import { useState } from 'react';" in code
        assert "const STEPS = [" in code
        assert (
            '  { id: "basics", label: "Basics", fields: ["firstName", "email"] },' in code
        )
        assert "  const [currentStep, setCurrentStep] = useState(0);" in code
        assert "await form.validateField(fieldName, 'change');" in code
        assert "{currentStep === 0 && (<>" in code
        assert "{currentStep === 2 && (<>" in code
        assert "<CardTitle>{STEPS[currentStep].label}</CardTitle>" in code
        assert '<Button type="button" onClick={handleNext}>Next</Button>' in code
        assert {"Card", "CardContent", "CardHeader", "CardTitle"} <= set(result.primitives)

    def test_step_description(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test step descriptions are carried into the constant."""
        steps = [
            {
                "id": "all",
                "label": "All",
                "description": "Everything",
                "fields": ["firstName"],
            }
        ]

        code = _generate(user_schema, settings, steps=steps).code

        assert (
            '  { id: "all", label: "All", description: "Everything", '
            'fields: ["firstName"] },'
        ) in code

    def test_fields_land_in_their_step(
        self, user_schema: Any, settings: GeneratorSettings
    ) -> None:
        """Test each field is rendered after its step gate."""
        code = _generate(user_schema, settings, steps=WIZARD_STEPS).code

        first_gate = code.index("{currentStep === 0 && (<>")
        second_gate = code.index("{currentStep === 1 && (<>")
        assert first_gate < code.index('name="email"') < second_gate
        assert second_gate < code.index('name="age"')

    def test_unknown_step_field(self, user_schema: Any, settings: GeneratorSettings) -> None:
        """Test structural errors propagate from generate."""
        with pytest.raises(StructuralError):
            _generate(
                user_schema,
                settings,
                steps=[{"id": "s", "label": "S", "fields": ["missing"]}],
            )


class TestWarnings:
    """Tests for warnings and per-field exclusion."""

    def test_unmapped_field_excluded(
        self, user_schema: Any, settings: GeneratorSettings
    ) -> None:
        """Test an unmapped field is dropped and the rest still generates."""
        registry = MappingRegistry()
        registry.unregister("boolean-checkbox")

        result = _generate(user_schema, settings, rules=registry, steps=WIZARD_STEPS)

        assert result.warnings == [
            'Field "isActive": No mapping rule matched field "isActive" '
            'of type "boolean"; '
            "field excluded from the form"
        ]
        assert "isActive" not in result.fields
        assert "isActive" not in result.code
        assert '  { id: "profile", label: "Profile", fields: ["age", "bio"] },' in result.code
        assert "Checkbox" not in result.primitives

    def test_failing_rule_excluded(self, settings: GeneratorSettings) -> None:
        """Test a custom rule that raises costs only the field it matched."""

        def boom(descriptor: Any) -> dict[str, Any]:
            raise ValueError("bad props")

        registry = MappingRegistry(
            [MappingRule("boom", lambda f: f.name == "bad", ComponentType.INPUT, boom)]
        )
        schema = z.object({"good": z.string(), "bad": z.string()})

        result = _generate(schema, settings, rules=registry)

        assert result.fields == ["good"]
        assert result.warnings == [
            'Field "bad": bad props; field excluded from the form'
        ]
        assert 'name="good"' in result.code
        assert 'name="bad"' not in result.code

    def test_invalid_props_excluded(self, settings: GeneratorSettings) -> None:
        """Test props that fail validation exclude the field with a warning."""
        registry = MappingRegistry(
            [
                MappingRule(
                    "bad-options",
                    lambda f: f.name == "bad",
                    ComponentType.SELECT,
                    lambda f: {"options": 5},
                )
            ]
        )
        schema = z.object({"good": z.string(), "bad": z.string()})

        result = _generate(schema, settings, rules=registry)

        assert result.fields == ["good"]
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith('Field "bad": ')
        assert result.warnings[0].endswith("; field excluded from the form")

    def test_introspection_warnings_pass_through(self, settings: GeneratorSettings) -> None:
        """Test degraded fields are reported and still rendered."""
        schema = z.object({"name": z.string(), "blob": z.any()})

        result = _generate(schema, settings)

        assert result.warnings == [
            'Field "blob": unsupported type "any" -- rendered as a plain text input'
        ]
        assert result.fields == ["name", "blob"]
        assert 'name="blob"' in result.code

    def test_non_object_root(self, settings: GeneratorSettings) -> None:
        """Test a non-object root is rejected."""
        with pytest.raises(StructuralError):
            _generate(z.string(), settings)
