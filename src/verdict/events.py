"""Validation events — synchronous listeners around ``validate()``.

A ``Validator`` with a dispatcher attached emits two events per call::

    validation.started     data is the merged input, result is None
    validation.completed   result is the ValidationResult

Listeners run in priority order (higher first), then in registration
order. Dispatch is synchronous; a listener that raises aborts the call
like any other error.

Thread safety:
    - ValidationEvent is a frozen dataclass (immutable, safe to share)
    - Listener registration is expected at setup time, not during dispatch
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from verdict.result import ValidationResult

logger = logging.getLogger("verdict.events")

VALIDATION_STARTED = "validation.started"
VALIDATION_COMPLETED = "validation.completed"

type Listener = Callable[[ValidationEvent], object]


@dataclass(frozen=True, slots=True)
class ValidationEvent:
    """A named moment in a validation call."""

    name: str
    data: Mapping[str, Any] = field(default_factory=dict)
    result: ValidationResult | None = None


class ValidationEventDispatcher:
    """Priority-ordered listener lists keyed by event name.

    Usage::

        dispatcher = ValidationEventDispatcher()
        dispatcher.add_listener("validation.completed", audit_log, priority=10)
        validator = Validator.with_defaults(dispatcher=dispatcher)
    """

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        # event name -> priority -> listeners
        self._listeners: dict[str, dict[int, list[Listener]]] = {}

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        by_priority = self._listeners.setdefault(event_name, {})
        by_priority.setdefault(priority, []).append(listener)

    def remove_listener(self, event_name: str, listener: Listener) -> bool:
        """Remove the first registration of *listener*. Returns whether one was found."""
        by_priority = self._listeners.get(event_name)
        if not by_priority:
            return False
        for priority, listeners in by_priority.items():
            if listener in listeners:
                listeners.remove(listener)
                if not listeners:
                    del by_priority[priority]
                if not by_priority:
                    del self._listeners[event_name]
                return True
        return False

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def dispatch(self, event: ValidationEvent) -> ValidationEvent:
        """Call every listener for ``event.name`` and return the event."""
        by_priority = self._listeners.get(event.name)
        if not by_priority:
            return event
        for priority in sorted(by_priority, reverse=True):
            # Copy so a listener may remove itself mid-dispatch
            for listener in list(by_priority.get(priority, ())):
                listener(event)
        logger.debug("Dispatched %r", event.name)
        return event
