# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Schema writer inputs and outputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from formsmith.introspection.types import FormDescriptor


class EmbeddedSchema(BaseModel):
    """A named schema emitted as its own ``export const`` declaration.

    Other schemas in the same file refer to it through
    ``FieldDescriptor.schema_ref`` set to its export name.
    """

    model_config = ConfigDict(frozen=True)

    form: FormDescriptor

    @property
    def name(self) -> str:
        return self.form.schema_export_name


class SchemaWriterResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    warnings: list[str] = []
