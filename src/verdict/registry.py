"""Rule registry — named lookup table for rule handlers.

Shared by reference between a ``Validator`` and its strategy, so rules
registered after construction are visible to the next ``validate()``.

Thread safety:
    - Registration is expected at setup time, before concurrent use
    - Lookups during validation only read ``_rules``
    - No internal locking; callers mutating concurrently must serialize
"""

import logging
from collections.abc import Mapping

from verdict.errors import ConfigurationError
from verdict.rules.base import RuleHandler

logger = logging.getLogger("verdict.registry")


class RuleRegistry:
    """Mapping of rule name to handler. Names are case-sensitive.

    Usage::

        registry = RuleRegistry()
        registry.register("required", RequiredRule())
        registry.get("required")  # RequiredRule instance
        registry.get("Required")  # None
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, RuleHandler] | None = None) -> None:
        self._rules: dict[str, RuleHandler] = {}
        for name, handler in (rules or {}).items():
            self.register(name, handler)

    def register(self, name: str, handler: RuleHandler) -> None:
        """Register *handler* under *name*, replacing any previous handler.

        Raises ``ConfigurationError`` if *name* is empty.
        """
        if not name:
            msg = "Rule name cannot be empty"
            raise ConfigurationError(msg)
        if name in self._rules:
            logger.debug("Overriding rule %r with %r", name, handler)
        self._rules[name] = handler

    def get(self, name: str) -> RuleHandler | None:
        """Look up a handler by name. Returns ``None`` if not registered."""
        return self._rules.get(name)

    def has(self, name: str) -> bool:
        return self.get(name) is not None

    def all(self) -> dict[str, RuleHandler]:
        """Snapshot of every registered handler, keyed by name."""
        return dict(self._rules)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._rules)
