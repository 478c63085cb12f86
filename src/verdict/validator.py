"""Validator — the public entry point tying registry, compiler and strategy together.

Construction is explicit about built-in rules::

    validator = Validator()                 # empty registry
    validator = Validator.with_defaults()   # required, email, between, ...

Basic usage::

    result = validator.validate(
        {"email": "a@example.com", "age": 25},
        {"email": "required|email", "age": "between:18,65"},
    )
    if result.fails():
        ...
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from verdict._internal.types import Data, MessageFormatter, Messages, RuleDeclaration
from verdict.compiler import CompiledRules, compile_rules
from verdict.config import ValidatorConfig
from verdict.context import ValidationContext
from verdict.errors import ConfigurationError
from verdict.events import (
    VALIDATION_COMPLETED,
    VALIDATION_STARTED,
    ValidationEvent,
    ValidationEventDispatcher,
)
from verdict.messages import format_message
from verdict.registry import RuleRegistry
from verdict.result import ValidationResult
from verdict.rules import default_rules
from verdict.rules.base import CallableRule, RuleHandler
from verdict.strategies import ValidationStrategy, build_strategy


class Validator:
    """Validates data mappings against declarative per-field rules.

    The registry is shared by reference: rules registered on it, through
    ``add_rule()`` or directly, are visible to every later ``validate()``.
    Extensions added with ``extend()`` belong to this validator only and
    take precedence over registry entries of the same name.

    *formatter* renders failure messages for the strategy built from
    *config*; pass a configured *strategy* instead to control both.
    """

    __slots__ = ("_context", "_dispatcher", "_extensions", "_registry", "_strategy", "config")

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        strategy: ValidationStrategy | None = None,
        *,
        config: ValidatorConfig | None = None,
        dispatcher: ValidationEventDispatcher | None = None,
        formatter: MessageFormatter | None = None,
    ) -> None:
        self.config = config or ValidatorConfig()
        self._registry = registry if registry is not None else RuleRegistry()
        self._strategy = strategy or build_strategy(
            self.config.strategy,
            self._registry,
            unknown_rules=self.config.unknown_rules,
            fallback_message=self.config.fallback_message,
            default_field=self.config.default_field,
            formatter=formatter or format_message,
        )
        self._dispatcher = dispatcher
        self._context: ValidationContext | None = None
        self._extensions: dict[str, RuleHandler] = {}

    @classmethod
    def with_defaults(
        cls,
        *,
        config: ValidatorConfig | None = None,
        dispatcher: ValidationEventDispatcher | None = None,
        formatter: MessageFormatter | None = None,
    ) -> Validator:
        """Build a validator whose registry holds every built-in rule."""
        return cls(
            RuleRegistry(default_rules()), config=config, dispatcher=dispatcher, formatter=formatter
        )

    # -- Validation --

    def validate(
        self,
        data: Data,
        rules: Mapping[str, RuleDeclaration] | str,
        messages: Messages | None = None,
    ) -> ValidationResult:
        """Validate *data* against *rules*.

        *rules* maps field names (dot notation allowed) to declarations,
        or is a single rule string applied to every top-level field.
        *messages* keys may be ``"field.rule"``, ``"field"`` or ``"rule"``.

        Raises ``ConfigurationError`` subclasses for setup mistakes
        (unregistered rule, bad rule parameters). Failed rules never raise.
        """
        merged_messages: dict[str, str] = dict(messages or {})
        merged_data: dict[str, Any] = dict(data)
        if self._context is not None:
            merged_messages = self._context.merge_messages(merged_messages)
            merged_data = self._context.merge_data(merged_data)

        compiled = self.compile(rules)

        if self._dispatcher is not None:
            self._dispatcher.dispatch(ValidationEvent(VALIDATION_STARTED, merged_data))

        result = self._strategy.validate(merged_data, compiled, merged_messages, self._extensions)

        if self._dispatcher is not None:
            self._dispatcher.dispatch(ValidationEvent(VALIDATION_COMPLETED, merged_data, result))
        return result

    def compile(self, rules: Mapping[str, RuleDeclaration] | str) -> CompiledRules:
        """Compile *rules*, merged under the context's default rules."""
        if isinstance(rules, str):
            rules = {self.config.default_field: rules}
        if self._context is not None:
            rules = self._context.merge_rules(rules)
        return compile_rules(rules, default_field=self.config.default_field)

    # -- Rules --

    def add_rule(self, name: str, rule: RuleHandler | Any) -> None:
        """Register a handler (or a bare callable) in the shared registry."""
        self._registry.register(name, _as_handler(name, rule))

    def extend(
        self, name: str, implementation: RuleHandler | Any, message: str | None = None
    ) -> None:
        """Add a rule to this validator only, without touching the registry.

        *implementation* is a ``RuleHandler`` or a callable
        ``(value, parameters, data) -> bool``; *message* sets the default
        message template for callables.
        """
        if not name:
            msg = "Extension name cannot be empty"
            raise ConfigurationError(msg)
        self._extensions[name] = _as_handler(name, implementation, message)

    def get_rule(self, name: str) -> RuleHandler | None:
        return self._registry.get(name)

    def has_rule(self, name: str) -> bool:
        return self._registry.has(name)

    def available_rules(self) -> dict[str, RuleHandler]:
        return self._registry.all()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def extensions(self) -> dict[str, RuleHandler]:
        return dict(self._extensions)

    # -- Collaborators --

    @property
    def strategy(self) -> ValidationStrategy:
        return self._strategy

    def set_strategy(self, strategy: ValidationStrategy) -> None:
        self._strategy = strategy

    @property
    def context(self) -> ValidationContext | None:
        return self._context

    def set_context(self, context: ValidationContext | None) -> None:
        self._context = context


def _as_handler(name: str, rule: Any, message: str | None = None) -> RuleHandler:
    """Pass handlers through; wrap bare callables in ``CallableRule``."""
    if isinstance(rule, RuleHandler):
        return rule
    if callable(rule):
        return CallableRule(name, rule, message)
    msg = f"Rule {name!r} must be a RuleHandler or a callable, got {type(rule).__name__}"
    raise ConfigurationError(msg)
