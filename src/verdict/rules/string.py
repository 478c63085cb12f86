"""String format rules: ``email``, ``regex``, ``in``."""

import re
from collections.abc import Mapping
from typing import Any

from verdict._internal.types import Data, Parameters
from verdict.errors import InvalidRuleParameterError
from verdict.messages import stringify
from verdict.rules.base import Rule

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$")


class EmailRule(Rule):
    """Value must be a string shaped like an email address."""

    message = "The :attribute must be a valid email address."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        if not isinstance(value, str):
            return False
        return _EMAIL_RE.match(value) is not None


class RegexRule(Rule):
    """Value must be a string containing a match for the pattern.

    Only the first colon of a rule segment separates name from
    parameters, so ``regex:^\\d{2}:\\d{2}$`` keeps its colons. Unquoted
    commas still split parameters; they are joined back here, so
    ``regex:^\\d{1,3}$`` works without quoting.
    """

    message = "The :attribute format is invalid."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        pattern = self._pattern(parameters)
        if not isinstance(value, str):
            return False
        return pattern.search(value) is not None

    def _pattern(self, parameters: Parameters) -> re.Pattern[str]:
        values = parameters.values() if isinstance(parameters, Mapping) else parameters
        source = ",".join(str(v) for v in values)
        if not source:
            raise InvalidRuleParameterError(self.name, "a pattern is required")
        try:
            return re.compile(source)
        except re.error as exc:
            raise InvalidRuleParameterError(self.name, f"bad pattern {source!r}: {exc}") from exc


class InRule(Rule):
    """Value must be one of the parameters.

    Both sides are compared as rendered by ``stringify()``, so ``True``
    matches ``"1"`` and ``25.0`` matches ``"25"``.
    """

    message = "The selected :attribute is invalid."

    def validate(self, value: Any, parameters: Parameters, data: Data) -> bool:
        values = parameters.values() if isinstance(parameters, Mapping) else parameters
        allowed = {stringify(v) for v in values}
        if not allowed:
            raise InvalidRuleParameterError(self.name, "at least one allowed value is required")
        if value is None or isinstance(value, list | tuple | dict | set):
            return False
        return stringify(value) in allowed
