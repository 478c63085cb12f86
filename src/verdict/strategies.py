"""Validation strategies — run compiled rules against data.

Each field moves through::

    PENDING -> (nullable short-circuit?) -> EVALUATING rule[0..n] -> PASSED | FAILED

The strategies differ only in what happens after a rule fails:
``StopOnFirstErrorStrategy`` stops evaluating that field,
``ValidateAllStrategy`` keeps going and collects every message. Other
fields are always evaluated.

Handlers are resolved per rule: the per-call extension map first, then
the registry. A name found in neither follows the strategy's
``UnknownRulePolicy``, one policy for the whole engine.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from verdict._internal.lookup import get_value, has_field
from verdict._internal.types import Data, MessageFormatter, Messages
from verdict.compiler import DEFAULT_FIELD, CompiledRules, RuleSpec
from verdict.errors import ConfigurationError, RuleContractError, RuleNotFoundError
from verdict.messages import DEFAULT_FALLBACK, format_message, resolve_message
from verdict.registry import RuleRegistry
from verdict.result import ValidationResult
from verdict.rules.base import RuleHandler

logger = logging.getLogger("verdict.engine")

# The only rule name with a short-circuit effect on None
NULLABLE_RULE = "nullable"


class UnknownRulePolicy(Enum):
    """What a strategy does with a rule name it cannot resolve."""

    RAISE = "raise"  # abort validate() with RuleNotFoundError
    SKIP = "skip"  # log a warning and move on to the next rule


class ValidationStrategy(ABC):
    """Base strategy: field iteration, handler dispatch, message building.

    Subclasses implement ``validate_field()``. The registry is held by
    reference, so handlers registered later are picked up. *formatter*
    renders a resolved template; it defaults to ``format_message()``.
    """

    __slots__ = (
        "default_field",
        "fallback_message",
        "formatter",
        "registry",
        "unknown_rules",
    )

    def __init__(
        self,
        registry: RuleRegistry,
        *,
        unknown_rules: UnknownRulePolicy = UnknownRulePolicy.RAISE,
        fallback_message: str = DEFAULT_FALLBACK,
        default_field: str = DEFAULT_FIELD,
        formatter: MessageFormatter = format_message,
    ) -> None:
        self.registry = registry
        self.unknown_rules = unknown_rules
        self.fallback_message = fallback_message
        self.default_field = default_field
        self.formatter = formatter

    def validate(
        self,
        data: Data,
        rules: CompiledRules,
        messages: Messages | None = None,
        extensions: Mapping[str, RuleHandler] | None = None,
    ) -> ValidationResult:
        """Validate *data* against *rules* and return a populated result.

        Raises ``ConfigurationError`` subclasses for setup mistakes; rule
        failures never raise.
        """
        messages = messages or {}
        extensions = extensions or {}
        result = ValidationResult()
        valid: dict[str, Any] = {}

        for field, specs in self._targets(data, rules):
            value = get_value(field, data)

            if value is None and any(spec.name == NULLABLE_RULE for spec in specs):
                logger.debug("Field %r is null and nullable; skipping its rules", field)
                result.mark_validated(field)
                valid[field] = None
                continue

            errors = self.validate_field(field, value, specs, data, messages, extensions)
            if errors:
                for error in errors:
                    result.add_error(field, error)
                continue

            result.mark_validated(field)
            if has_field(field, data):
                valid[field] = value

        for field, value in valid.items():
            if not result.has_error(field):
                result.add_valid_data(field, value)

        logger.debug(
            "Validated %d fields with %s: %d errors",
            len(result.validated_fields),
            type(self).__name__,
            result.error_count,
        )
        return result

    @abstractmethod
    def validate_field(
        self,
        field: str,
        value: Any,
        specs: tuple[RuleSpec, ...],
        data: Data,
        messages: Messages,
        extensions: Mapping[str, RuleHandler],
    ) -> list[str]:
        """Evaluate one field's rules and return its error messages."""

    def validate_rule(
        self,
        field: str,
        value: Any,
        spec: RuleSpec,
        data: Data,
        messages: Messages,
        extensions: Mapping[str, RuleHandler],
    ) -> str | None:
        """Run a single rule. Returns the formatted message on failure.

        Returns ``None`` when the rule passes, or when it cannot be
        resolved under ``UnknownRulePolicy.SKIP``.
        """
        handler = extensions.get(spec.name)
        if handler is None:
            handler = self.registry.get(spec.name)
        if handler is None:
            if self.unknown_rules is UnknownRulePolicy.RAISE:
                raise RuleNotFoundError(spec.name)
            logger.warning("Skipping unregistered rule %r on field %r", spec.name, field)
            return None

        valid = handler.validate(value, spec.parameters, data)
        if not isinstance(valid, bool):
            raise RuleContractError(spec.name, valid)
        if valid:
            return None

        template = resolve_message(
            field, spec.name, messages, default=handler.message, fallback=self.fallback_message
        )
        return self.formatter(template, field, spec.parameters)

    def _targets(
        self, data: Data, rules: CompiledRules
    ) -> Iterator[tuple[str, tuple[RuleSpec, ...]]]:
        """Yield ``(field, specs)`` pairs in evaluation order.

        Rules under the default field apply to every top-level data key
        without rules of its own. With no such key and no other field,
        they run once against the default field itself (value ``None``).
        """
        explicit = [
            field
            for field in rules.fields()
            if field != self.default_field and rules.has_rule(field)
        ]
        for field in explicit:
            yield field, rules.get_rule(field)

        default_specs = rules.get_rule(self.default_field)
        if not default_specs:
            return

        claimed = set(explicit)
        targets = [key for key in data if key not in claimed]
        if targets:
            for key in targets:
                yield key, default_specs
        elif not explicit:
            yield self.default_field, default_specs


class StopOnFirstErrorStrategy(ValidationStrategy):
    """Stop evaluating a field at its first failing rule."""

    __slots__ = ()

    def validate_field(
        self,
        field: str,
        value: Any,
        specs: tuple[RuleSpec, ...],
        data: Data,
        messages: Messages,
        extensions: Mapping[str, RuleHandler],
    ) -> list[str]:
        for spec in specs:
            error = self.validate_rule(field, value, spec, data, messages, extensions)
            if error is not None:
                return [error]
        return []


class ValidateAllStrategy(ValidationStrategy):
    """Evaluate every rule of every field and collect all messages."""

    __slots__ = ()

    def validate_field(
        self,
        field: str,
        value: Any,
        specs: tuple[RuleSpec, ...],
        data: Data,
        messages: Messages,
        extensions: Mapping[str, RuleHandler],
    ) -> list[str]:
        errors: list[str] = []
        for spec in specs:
            error = self.validate_rule(field, value, spec, data, messages, extensions)
            if error is not None:
                errors.append(error)
        return errors


# Strategy names accepted by ``ValidatorConfig.strategy``
STRATEGIES: dict[str, type[ValidationStrategy]] = {
    "stop_on_first_error": StopOnFirstErrorStrategy,
    "validate_all": ValidateAllStrategy,
}


def build_strategy(
    name: str,
    registry: RuleRegistry,
    *,
    unknown_rules: UnknownRulePolicy = UnknownRulePolicy.RAISE,
    fallback_message: str = DEFAULT_FALLBACK,
    default_field: str = DEFAULT_FIELD,
    formatter: MessageFormatter = format_message,
) -> ValidationStrategy:
    """Instantiate the strategy registered under *name*.

    Raises ``ConfigurationError`` for an unknown name.
    """
    strategy_cls = STRATEGIES.get(name)
    if strategy_cls is None:
        options = ", ".join(sorted(STRATEGIES))
        msg = f"Unknown validation strategy {name!r}. Expected one of: {options}"
        raise ConfigurationError(msg)
    return strategy_cls(
        registry,
        unknown_rules=unknown_rules,
        fallback_message=fallback_message,
        default_field=default_field,
        formatter=formatter,
    )
