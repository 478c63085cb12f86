"""Dot-notation field resolution.

``"address.city"`` walks nested mappings; integer segments index into
lists and tuples. A missing segment resolves to ``None`` instead of
raising, so callers cannot tell "absent" from "explicitly null".
"""

from collections.abc import Mapping, Sequence
from typing import Any


def get_value(field: str, data: Mapping[str, Any]) -> Any:
    """Resolve *field* against *data*, returning ``None`` when absent.

    A literal key wins over traversal, so ``{"a.b": 1}`` resolves
    ``"a.b"`` to ``1`` without descending.
    """
    if field in data:
        return data[field]
    if "." not in field:
        return None

    current: Any = data
    for segment in field.split("."):
        match current:
            case Mapping():
                if segment not in current:
                    return None
                current = current[segment]
            case list() | tuple():
                current = _index(current, segment)
            case _:
                return None
        if current is None:
            return None
    return current


def has_field(field: str, data: Mapping[str, Any]) -> bool:
    """True when *field* is a direct key or resolves to a non-null value."""
    return field in data or get_value(field, data) is not None


def _index(items: Sequence[Any], segment: str) -> Any:
    if not segment.isdigit():
        return None
    position = int(segment)
    if position >= len(items):
        return None
    return items[position]
