"""Error message resolution and placeholder formatting.

Resolution picks a template, first match wins::

    messages["email.required"]   # field + rule
    messages["email"]            # field
    messages["required"]         # rule
    handler.message              # the rule's own default
    fallback                     # "The :attribute field validation failed."

Formatting is plain string replacement: ``:attribute`` becomes the field
name, parameters fill ``:param0``, ``:param1``... in order, and named
parameters also fill ``:<key>``. Named parameters are numbered in
insertion order, the same order the built-in rules read them in.
"""

from collections.abc import Mapping
from typing import Any

from verdict._internal.types import Messages, Parameters

DEFAULT_FALLBACK = "The :attribute field validation failed."


def resolve_message(
    field: str,
    rule: str,
    messages: Messages,
    default: str | None = None,
    fallback: str = DEFAULT_FALLBACK,
) -> str:
    """Pick the message template for *rule* failing on *field*.

    A bare field key outranks a bare rule key: the more specific
    customization wins.
    """
    for key in (f"{field}.{rule}", field, rule):
        if key in messages:
            return messages[key]
    return default or fallback


def format_message(template: str, field: str, parameters: Parameters = ()) -> str:
    """Substitute ``:attribute`` and parameter placeholders in *template*."""
    message = template.replace(":attribute", field)
    values = list(parameters.values()) if isinstance(parameters, Mapping) else list(parameters)

    # Highest index first so ":param1" never eats the front of ":param10"
    for index in range(len(values) - 1, -1, -1):
        message = message.replace(f":param{index}", stringify(values[index]))

    if isinstance(parameters, Mapping):
        # Longest keys first so ":max" never eats the front of ":maximum"
        for key in sorted(parameters, key=lambda k: len(str(k)), reverse=True):
            message = message.replace(f":{key}", stringify(parameters[key]))
    return message


def stringify(value: Any) -> str:
    """Render a parameter for a message.

    ``True`` -> ``"1"``, ``False`` and ``None`` -> ``""``, whole floats
    drop their fractional part (``25.0`` -> ``"25"``).
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
