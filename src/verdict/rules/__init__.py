"""Built-in rule handlers.

``default_rules()`` returns a fresh instance of every built-in handler,
keyed by rule name. ``Validator.with_defaults()`` registers them; a bare
``Validator()`` starts with an empty registry.
"""

from verdict.rules.base import CallableRule, Rule, RuleHandler
from verdict.rules.common import NullableRule, RequiredRule, SameRule
from verdict.rules.size import BetweenRule, MaxRule, MinRule, SizeAwareRule, SizeRule
from verdict.rules.string import EmailRule, InRule, RegexRule
from verdict.rules.types import (
    ArrayRule,
    BooleanRule,
    FloatRule,
    IntegerRule,
    NumericRule,
    ObjectRule,
    StringRule,
)

__all__ = [
    "ArrayRule",
    "BetweenRule",
    "BooleanRule",
    "CallableRule",
    "EmailRule",
    "FloatRule",
    "InRule",
    "IntegerRule",
    "MaxRule",
    "MinRule",
    "NullableRule",
    "NumericRule",
    "ObjectRule",
    "RegexRule",
    "RequiredRule",
    "Rule",
    "RuleHandler",
    "SameRule",
    "SizeAwareRule",
    "SizeRule",
    "StringRule",
    "default_rules",
]


def default_rules() -> dict[str, RuleHandler]:
    """Fresh built-in handlers keyed by name."""
    handlers: list[RuleHandler] = [
        RequiredRule(),
        NullableRule(),
        SameRule(),
        MinRule(),
        MaxRule(),
        BetweenRule(),
        SizeRule(),
        EmailRule(),
        RegexRule(),
        InRule(),
        StringRule(),
        IntegerRule(),
        FloatRule(),
        NumericRule(),
        BooleanRule(),
        ArrayRule(),
        ObjectRule(),
    ]
    return {handler.name: handler for handler in handlers}
