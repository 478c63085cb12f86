"""Size rules: ``min``, ``max``, ``between``, ``size``.

The size of a value is its length for strings and collections and the
number itself for ints and floats. Anything else (``None``, ``bool``,
arbitrary objects) has no size and fails the rule.

Bounds come from rule parameters, so ``between:18,65`` arrives as the
strings ``"18"`` and ``"65"``. A missing or non-numeric bound is a
configuration mistake and raises ``InvalidRuleParameterError``.
"""

import math
from abc import abstractmethod
from collections.abc import Sized
from typing import Any

from verdict._internal.types import Data, Parameters
from verdict.errors import InvalidRuleParameterError
from verdict.rules.base import Rule, parameter


class SizeAwareRule(Rule):
    """Base for rules that compare the size of a value against bounds."""

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        size = get_size(value)
        if size is None:
            return False
        return self.is_size_valid(size, parameters)

    @abstractmethod
    def is_size_valid(self, size: float, parameters: Parameters) -> bool: ...

    def bound(self, parameters: Parameters, index: int, label: str) -> float:
        raw = parameter(parameters, index)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            raise InvalidRuleParameterError(self.name, f"{label} parameter is required")
        if isinstance(raw, bool):
            raise InvalidRuleParameterError(self.name, f"{label} parameter must be numeric")
        try:
            return float(raw)
        except (TypeError, ValueError):
            msg = f"{label} parameter must be numeric, got {raw!r}"
            raise InvalidRuleParameterError(self.name, msg) from None


class MinRule(SizeAwareRule):
    message = "The :attribute must be at least :param0."

    def is_size_valid(self, size: float, parameters: Parameters) -> bool:
        return size >= self.bound(parameters, 0, "minimum")


class MaxRule(SizeAwareRule):
    message = "The :attribute may not be greater than :param0."

    def is_size_valid(self, size: float, parameters: Parameters) -> bool:
        return size <= self.bound(parameters, 0, "maximum")


class BetweenRule(SizeAwareRule):
    """Inclusive range check: ``between:5,10`` accepts 5 and 10."""

    message = "The :attribute must be between :param0 and :param1."

    def is_size_valid(self, size: float, parameters: Parameters) -> bool:
        low = self.bound(parameters, 0, "minimum")
        high = self.bound(parameters, 1, "maximum")
        if low > high:
            raise InvalidRuleParameterError(
                self.name, "minimum parameter cannot be greater than maximum parameter"
            )
        return low <= size <= high


class SizeRule(SizeAwareRule):
    message = "The :attribute must be :param0."

    def is_size_valid(self, size: float, parameters: Parameters) -> bool:
        expected = self.bound(parameters, 0, "size")
        return math.isclose(size, expected, rel_tol=0.0, abs_tol=1e-9)


def get_size(value: Any) -> float | None:
    """Length for strings and collections, the value for numbers, else ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if isinstance(value, Sized):
        return len(value)
    return None
