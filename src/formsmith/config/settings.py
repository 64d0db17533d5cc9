# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Generator settings.

Import paths and output switches for the emitted TypeScript, loaded from
``FORMSMITH_*`` environment variables and an optional ``.env`` file.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from formsmith.config.errors import ConfigError


class GeneratorSettings(BaseSettings):
    """Settings consumed by the form generator and the schema writer."""

    model_config = SettingsConfigDict(
        env_prefix="FORMSMITH_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    ui_import_path: str = Field(
        default="@/components/ui", description="Module the UI primitives come from"
    )
    form_import_path: str = Field(
        default="@tanstack/react-form", description="Module providing useForm"
    )
    zod_import_path: str = Field(
        default="zod/v4", description="Module the generated schema imports z from"
    )
    use_client: bool = Field(
        default=True, description="Emit the 'use client' directive on forms"
    )


def get_settings(**overrides: Any) -> GeneratorSettings:
    """Load a fresh settings object.

    Nothing is cached; every call re-reads the environment so callers never
    share hidden state. Keyword overrides take precedence over the environment.

    Raises:
        ConfigError: If a setting has a value of the wrong type
    """
    try:
        return GeneratorSettings(**overrides)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise ConfigError(
            f"Invalid generator settings: {', '.join(fields)}", fields=fields
        ) from exc
