"""Validation context — reusable defaults merged into a ``validate()`` call.

A context bundles default rules, messages, and attributes under a name
(e.g. "signup" or "admin-update"). It is a frozen dataclass; each
``.with_*()`` call returns a new context::

    ctx = (
        ValidationContext("signup")
        .with_rule("email", "required|email")
        .with_message("required", "Please fill in :attribute.")
        .with_attribute("country", "FR")
    )
    validator.set_context(ctx)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from verdict._internal.types import RuleDeclaration


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Named defaults for rules, messages, and data attributes.

    Merge order in ``Validator.validate()``: context rules and messages
    come first so the caller's own entries win on collision; attributes
    fill in only the data keys the caller did not supply.
    """

    name: str
    rules: Mapping[str, RuleDeclaration] = field(default_factory=dict)
    messages: Mapping[str, str] = field(default_factory=dict)
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    # -- Chainable transformations --

    def with_rule(self, field_name: str, rules: RuleDeclaration) -> ValidationContext:
        """Return a new context with *rules* set for *field_name*."""
        return replace(self, rules={**self.rules, field_name: rules})

    def with_message(self, key: str, message: str) -> ValidationContext:
        """Return a new context with a custom message for *key*."""
        return replace(self, messages={**self.messages, key: message})

    def with_attribute(self, name: str, value: Any) -> ValidationContext:
        """Return a new context with a default data value for *name*."""
        return replace(self, attributes={**self.attributes, name: value})

    # -- Merging --

    def merge_rules(self, rules: Mapping[str, RuleDeclaration]) -> dict[str, RuleDeclaration]:
        return {**self.rules, **rules}

    def merge_messages(self, messages: Mapping[str, str]) -> dict[str, str]:
        return {**self.messages, **messages}

    def merge_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {**self.attributes, **data}
