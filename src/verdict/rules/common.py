"""Presence rules: ``required``, ``nullable``, ``same``."""

from collections.abc import Mapping, Sized
from typing import Any

from verdict._internal.lookup import get_value
from verdict._internal.types import Data, Parameters
from verdict.errors import InvalidRuleParameterError
from verdict.rules.base import Rule, parameter


class RequiredRule(Rule):
    """Value must be present and non-empty.

    Fails for ``None``, a blank string, and an empty collection.
    """

    message = "The :attribute field is required."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, Sized):
            return len(value) > 0
        return True


class NullableRule(Rule):
    """Marker rule: the field may be ``None``.

    Always passes. The strategy short-circuits the whole field when the
    value is ``None`` and this rule is present.
    """

    message = "The :attribute field may be null."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        return True


class SameRule(Rule):
    """Value must equal another field, resolved with dot notation."""

    message = "The :attribute field must match :param0."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        other = parameter(parameters, 0)
        if not other:
            raise InvalidRuleParameterError(self.name, "the other field name is required")
        if not isinstance(data, Mapping):
            return False
        return value == get_value(str(other), data)
