# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith

"""
Public API for the formsmith logging system.

Structured logging with bound context, configured from the environment.
"""

from __future__ import annotations

from formsmith.logging.config import LoggingSettings
from formsmith.logging.level import LogLevel
from formsmith.logging.logger import FormsmithLogger, StructuredFormatter, get_logger

__all__ = [
    "LogLevel",
    "FormsmithLogger",
    "StructuredFormatter",
    "LoggingSettings",
    "get_logger",
]
