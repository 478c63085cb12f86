"""Shared type aliases used across verdict modules."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

# Input data being validated
type Data = Mapping[str, Any]

# Parameters handed to a rule handler: positional from rule strings,
# named when a structured record supplies a mapping
type Parameters = Sequence[Any] | Mapping[str, Any]

# Bare callable accepted by ``Validator.extend()`` / ``Validator.add_rule()``
type RuleFunction = Callable[[Any, Parameters, Data], bool]

# Anything a caller may declare as the rules for one field
type RuleDeclaration = Any

# Custom messages keyed by "field.rule", "field" or "rule"
type Messages = Mapping[str, str]

# Renders a resolved template: (template, field, parameters) -> message
type MessageFormatter = Callable[[str, str, Parameters], str]
