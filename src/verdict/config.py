"""Validator configuration.

ValidatorConfig is a frozen dataclass: one object describes how a
``Validator`` builds its strategy and formats fallback messages.
"""

from dataclasses import dataclass

from verdict.compiler import DEFAULT_FIELD
from verdict.messages import DEFAULT_FALLBACK
from verdict.strategies import UnknownRulePolicy


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(strategy="validate_all", unknown_rules=UnknownRulePolicy.SKIP)
    """

    # Engine
    strategy: str = "stop_on_first_error"
    unknown_rules: UnknownRulePolicy = UnknownRulePolicy.RAISE

    # Messages
    fallback_message: str = DEFAULT_FALLBACK

    # Rules declared as a bare string land under this field key
    default_field: str = DEFAULT_FIELD
