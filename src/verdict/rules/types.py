"""Type rules — plain ``isinstance`` checks.

``bool`` is a subclass of ``int`` in Python; the numeric rules reject it
so ``True`` never counts as the integer ``1``.
"""

import re
from collections.abc import Mapping
from typing import Any

from verdict._internal.types import Data, Parameters
from verdict.rules.base import Rule

# Decimal or exponent notation, optional sign and surrounding whitespace
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_BUILTIN_VALUES = (str, bytes, bytearray, int, float, complex, list, tuple, dict, set, frozenset)


class StringRule(Rule):
    message = "The :attribute must be a string."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return isinstance(value, str)


class IntegerRule(Rule):
    message = "The :attribute must be an integer."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


class FloatRule(Rule):
    message = "The :attribute must be a float."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return isinstance(value, float)


class NumericRule(Rule):
    """Int, float, or a string holding a decimal number."""

    message = "The :attribute must be a number."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int | float):
            return True
        return isinstance(value, str) and _NUMERIC_RE.match(value) is not None


class BooleanRule(Rule):
    message = "The :attribute must be a boolean."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return isinstance(value, bool)


class ArrayRule(Rule):
    """A list, tuple, or mapping."""

    message = "The :attribute must be an array."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return isinstance(value, list | tuple | Mapping)


class ObjectRule(Rule):
    """An instance that is neither ``None`` nor a builtin scalar or collection."""

    message = "The :attribute must be an object."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        if value is None or isinstance(value, bool):
            return False
        return not isinstance(value, _BUILTIN_VALUES)
