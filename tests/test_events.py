"""Tests for verdict.events — priority-ordered listener dispatch."""

from typing import Any

import pytest

from verdict.events import (
    VALIDATION_COMPLETED,
    VALIDATION_STARTED,
    ValidationEvent,
    ValidationEventDispatcher,
)
from verdict.result import ValidationResult


@pytest.fixture
def dispatcher() -> ValidationEventDispatcher:
    return ValidationEventDispatcher()


class TestListeners:
    def test_no_listeners(self, dispatcher: ValidationEventDispatcher) -> None:
        event = ValidationEvent(VALIDATION_STARTED)
        assert dispatcher.dispatch(event) is event
        assert not dispatcher.has_listeners(VALIDATION_STARTED)

    def test_dispatch_to_matching_name_only(self, dispatcher: ValidationEventDispatcher) -> None:
        seen: list[str] = []
        dispatcher.add_listener(VALIDATION_STARTED, lambda e: seen.append("started"))
        dispatcher.add_listener(VALIDATION_COMPLETED, lambda e: seen.append("completed"))
        dispatcher.dispatch(ValidationEvent(VALIDATION_COMPLETED))
        assert seen == ["completed"]

    def test_priority_then_registration_order(
        self, dispatcher: ValidationEventDispatcher
    ) -> None:
        seen: list[str] = []
        dispatcher.add_listener("e", lambda e: seen.append("low"), priority=-5)
        dispatcher.add_listener("e", lambda e: seen.append("first"))
        dispatcher.add_listener("e", lambda e: seen.append("high"), priority=10)
        dispatcher.add_listener("e", lambda e: seen.append("second"))
        dispatcher.dispatch(ValidationEvent("e"))
        assert seen == ["high", "first", "second", "low"]

    def test_listener_receives_event(self, dispatcher: ValidationEventDispatcher) -> None:
        received: list[ValidationEvent] = []
        dispatcher.add_listener(VALIDATION_COMPLETED, received.append)
        result = ValidationResult()
        event = ValidationEvent(VALIDATION_COMPLETED, {"a": 1}, result)
        dispatcher.dispatch(event)
        assert received == [event]
        assert received[0].result is result

    def test_listener_error_propagates(self, dispatcher: ValidationEventDispatcher) -> None:
        def boom(event: Any) -> None:
            msg = "listener failed"
            raise RuntimeError(msg)

        dispatcher.add_listener("e", boom)
        with pytest.raises(RuntimeError, match="listener failed"):
            dispatcher.dispatch(ValidationEvent("e"))


class TestRemove:
    def test_remove(self, dispatcher: ValidationEventDispatcher) -> None:
        seen: list[str] = []

        def listener(event: Any) -> None:
            seen.append("x")

        dispatcher.add_listener("e", listener, priority=3)
        assert dispatcher.remove_listener("e", listener) is True
        assert not dispatcher.has_listeners("e")
        dispatcher.dispatch(ValidationEvent("e"))
        assert seen == []

    def test_remove_unknown(self, dispatcher: ValidationEventDispatcher) -> None:
        assert dispatcher.remove_listener("e", print) is False
        dispatcher.add_listener("e", len)
        assert dispatcher.remove_listener("e", print) is False
        assert dispatcher.has_listeners("e")

    def test_listener_may_remove_itself(self, dispatcher: ValidationEventDispatcher) -> None:
        calls: list[int] = []

        def once(event: Any) -> None:
            calls.append(1)
            dispatcher.remove_listener("e", once)

        dispatcher.add_listener("e", once)
        dispatcher.dispatch(ValidationEvent("e"))
        dispatcher.dispatch(ValidationEvent("e"))
        assert calls == [1]
