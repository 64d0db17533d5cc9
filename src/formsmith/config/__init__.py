# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""Configuration management for formsmith.

Settings are loaded from environment variables and ``.env`` files.
"""

from formsmith.config.errors import ConfigError
from formsmith.config.settings import GeneratorSettings, get_settings

__all__ = [
    "ConfigError",
    "GeneratorSettings",
    "get_settings",
]
