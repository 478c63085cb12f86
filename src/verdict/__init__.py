"""Verdict — declarative field validation for mappings.

Rules are declared per field as pipe strings, records, or handler
objects, compiled into an ordered rule list, and run by a pluggable
strategy that reports errors and valid data per field.

Basic usage::

    from verdict import validate

    result = validate(
        {"email": "ada@example.com", "age": 36},
        {"email": "required|email", "age": "nullable|between:18,65"},
    )
    if result.fails():
        print(result.first_errors())

Custom rules::

    from verdict import Validator

    validator = Validator.with_defaults()
    validator.extend("even", lambda value, params, data: value % 2 == 0)
    validator.validate({"n": 3}, {"n": "integer|even"})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from verdict.result import ValidationResult

__version__ = "0.1.0"
__all__ = [
    "CompiledRules",
    "ConfigurationError",
    "InvalidRuleParameterError",
    "Rule",
    "RuleContractError",
    "RuleHandler",
    "RuleNotFoundError",
    "RuleRegistry",
    "RuleSpec",
    "StopOnFirstErrorStrategy",
    "UnknownRule",
    "UnknownRulePolicy",
    "ValidateAllStrategy",
    "ValidationContext",
    "ValidationEvent",
    "ValidationEventDispatcher",
    "ValidationResult",
    "ValidationStrategy",
    "Validator",
    "ValidatorConfig",
    "VerdictError",
    "validate",
]


def validate(
    data: Mapping[str, Any],
    rules: Mapping[str, Any] | str,
    messages: Mapping[str, str] | None = None,
) -> ValidationResult:
    """Validate *data* with a fresh ``Validator.with_defaults()``."""
    from verdict.validator import Validator

    return Validator.with_defaults().validate(data, rules, messages)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import verdict`` fast while providing a clean top-level API.
    """
    if name == "Validator":
        from verdict.validator import Validator

        return Validator

    if name == "ValidatorConfig":
        from verdict.config import ValidatorConfig

        return ValidatorConfig

    if name == "ValidationResult":
        from verdict.result import ValidationResult

        return ValidationResult

    if name == "RuleRegistry":
        from verdict.registry import RuleRegistry

        return RuleRegistry

    if name == "ValidationContext":
        from verdict.context import ValidationContext

        return ValidationContext

    if name in ("CompiledRules", "RuleSpec", "UnknownRule"):
        from verdict import compiler as _compiler

        return getattr(_compiler, name)

    if name in ("Rule", "RuleHandler"):
        from verdict.rules import base as _base

        return getattr(_base, name)

    if name in (
        "StopOnFirstErrorStrategy",
        "UnknownRulePolicy",
        "ValidateAllStrategy",
        "ValidationStrategy",
    ):
        from verdict import strategies as _strategies

        return getattr(_strategies, name)

    if name in ("ValidationEvent", "ValidationEventDispatcher"):
        from verdict import events as _events

        return getattr(_events, name)

    if name in (
        "ConfigurationError",
        "InvalidRuleParameterError",
        "RuleContractError",
        "RuleNotFoundError",
        "VerdictError",
    ):
        from verdict import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
