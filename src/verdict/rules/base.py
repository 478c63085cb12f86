"""Rule handler protocol, base class, and callable adapter.

A rule handler is anything matching::

    class Handler:
        name: str
        message: str

        def validate(self, value, parameters, data) -> bool: ...

No base class required. The engine checks the shape, not the lineage.
``Rule`` is a convenience base that derives ``name`` from the class name,
and ``CallableRule`` adapts a bare function so the engine never has to
branch on "is this callable?".
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from verdict._internal.types import Data, Parameters, RuleFunction

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@runtime_checkable
class RuleHandler(Protocol):
    """Protocol for a named validation predicate plus its default message.

    ``message`` is a template: ``:attribute`` is replaced with the field
    name and ``:param0``, ``:param1``... with the rule parameters.
    """

    @property
    def name(self) -> str: ...

    @property
    def message(self) -> str: ...

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool: ...


class Rule(ABC):
    """Base class for built-in and user-defined rule handlers.

    Subclasses must implement ``validate()`` and usually override ``message``.
    The rule name is the class name without its ``Rule`` suffix, in
    snake_case (``BetweenRule`` -> ``between``), unless the subclass
    sets ``rule_name``.
    """

    rule_name: ClassVar[str | None] = None
    message: str = "Validation failed for :attribute"

    @property
    def name(self) -> str:
        if self.rule_name:
            return self.rule_name
        return to_snake_case(type(self).__name__.removesuffix("Rule"))

    @abstractmethod
    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class CallableRule(Rule):
    """Adapt a ``(value, parameters, data) -> bool`` function to ``RuleHandler``."""

    def __init__(self, name: str, func: RuleFunction, message: str | None = None) -> None:
        self._name = name
        self._func = func
        self.message = message or "The :attribute field is invalid."

    @property
    def name(self) -> str:
        return self._name

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return self._func(value, parameters, data)


def to_snake_case(name: str) -> str:
    """``NotIn`` -> ``not_in``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def parameter(parameters: Parameters, index: int) -> Any:
    """Return the *index*-th parameter, or ``None`` when it is missing.

    Named parameters (a mapping) are read in insertion order so rules can
    be declared either way.
    """
    values = list(parameters.values()) if isinstance(parameters, Mapping) else list(parameters)
    if index >= len(values):
        return None
    return values[index]
