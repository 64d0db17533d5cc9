# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formsmith
"""
Mapping rule registry.

A ``MappingRegistry`` is an explicit rule table owned by whoever constructs
it. Custom rules can be registered ahead of the defaults, so they take
precedence, or after them as fallbacks. There is no module-level registry;
to start over, construct a new one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from formsmith.introspection.types import FieldDescriptor
from formsmith.mapping.resolver import resolve_field
from formsmith.mapping.rules import DEFAULT_RULES
from formsmith.mapping.types import ComponentConfig, MappingRule


class MappingRegistry:
    """Ordered mapping rules: custom rules, defaults, then fallbacks."""

    def __init__(
        self,
        rules: Iterable[MappingRule] = (),
        include_defaults: bool = True,
    ) -> None:
        """Initialize a registry.

        Args:
            rules: Custom rules, placed ahead of the defaults in this order
            include_defaults: Whether to seed the built-in rules
        """
        self._custom: list[MappingRule] = []
        self._defaults: list[MappingRule] = list(DEFAULT_RULES) if include_defaults else []
        self._fallbacks: list[MappingRule] = []
        for rule in rules:
            self.register(rule)

    def register(self, rule: MappingRule, before_defaults: bool = True) -> None:
        """Register a rule.

        A rule with the same name as an existing one replaces it.

        Args:
            rule: The rule to add
            before_defaults: Match ahead of the defaults when True; after
                every other rule otherwise
        """
        self.unregister(rule.name)
        if before_defaults:
            self._custom.append(rule)
        else:
            self._fallbacks.append(rule)

    def unregister(self, name: str) -> bool:
        """Remove the rule named ``name``. Returns whether one was removed."""
        for table in (self._custom, self._defaults, self._fallbacks):
            for index, rule in enumerate(table):
                if rule.name == name:
                    del table[index]
                    return True
        return False

    def get(self, name: str) -> MappingRule | None:
        """Get a registered rule by name.

        Args:
            name: Rule name

        Returns:
            The rule or None if not found
        """
        return next((rule for rule in self if rule.name == name), None)

    @property
    def rules(self) -> tuple[MappingRule, ...]:
        """All rules in match order."""
        return (*self._custom, *self._defaults, *self._fallbacks)

    def resolve(self, descriptor: FieldDescriptor) -> ComponentConfig:
        """Resolve a field against this registry's rules."""
        return resolve_field(descriptor, self.rules)

    def __iter__(self) -> Iterator[MappingRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self.rules)
