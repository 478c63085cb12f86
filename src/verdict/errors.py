"""Verdict exception hierarchy.

Shared across the compiler, registry, strategies and validator so every
module raises and catches the same types.

Per-rule validation failures are never raised. They land in the
``ValidationResult``. Everything in this module signals a setup mistake
and aborts the whole ``validate()`` call.
"""


class VerdictError(Exception):
    """Base for all verdict-specific errors."""


class ConfigurationError(VerdictError):
    """Raised when the validator or a rule is configured incorrectly.

    Typically raised at registration time (empty rule name, non-callable
    extension) or when a ``Validator`` is built from a bad config.
    """


class RuleNotFoundError(ConfigurationError):
    """A compiled rule names a handler that is neither an extension nor registered."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Rule {rule!r} is not registered.")


class InvalidRuleParameterError(ConfigurationError):
    """A rule was declared with parameters it cannot work with.

    Distinguishes "the caller misconfigured the rule" from "the data
    failed the rule", e.g. ``between:5`` without an upper bound.
    """

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"Invalid parameters for rule {rule!r}: {detail}")


class RuleContractError(ConfigurationError):
    """A rule handler returned something other than ``True`` or ``False``."""

    def __init__(self, rule: str, returned: object) -> None:
        self.rule = rule
        self.returned = returned
        kind = type(returned).__name__
        super().__init__(f"Rule {rule!r} must return a bool, got {kind}")
