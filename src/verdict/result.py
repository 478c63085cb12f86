"""Validation result — per-field errors, valid data, validated fields."""

from typing import Any


class ValidationResult:
    """The outcome of validating data against a set of rules.

    ``passes()`` is True when there are no errors. The result is falsy
    when invalid, so you can write::

        result = validator.validate(form, rules)
        if not result:
            return render("form.html", errors=result.first_errors())

    ``errors`` maps field names to messages in the order they were
    produced; the first message is the field's "first error"::

        {"email": ["The email field is required."]}

    The strategy builds the result incrementally with ``add_error()``
    and ``add_valid_data()``. Once returned, treat it as read-only:
    accessors hand out copies.
    """

    __slots__ = ("_errors", "_valid_data", "_validated_fields")

    def __init__(
        self,
        errors: dict[str, list[str]] | None = None,
        valid_data: dict[str, Any] | None = None,
        validated_fields: list[str] | None = None,
    ) -> None:
        self._errors: dict[str, list[str]] = {k: list(v) for k, v in (errors or {}).items()}
        self._valid_data: dict[str, Any] = dict(valid_data or {})
        # dict as an insertion-ordered set
        self._validated_fields: dict[str, None] = dict.fromkeys(validated_fields or ())

    # -- Status --

    def passes(self) -> bool:
        return not self._errors

    def fails(self) -> bool:
        return bool(self._errors)

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return self.passes()

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.passes()

    # -- Errors --

    @property
    def errors(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def first_errors(self) -> dict[str, str]:
        """First error message of every failing field."""
        return {field: messages[0] for field, messages in self._errors.items() if messages}

    def error(self, field: str) -> str | None:
        """First error message for *field*, or ``None`` when it passed."""
        messages = self._errors.get(field)
        return messages[0] if messages else None

    def field_errors(self, field: str) -> list[str]:
        return list(self._errors.get(field, ()))

    def has_error(self, field: str) -> bool:
        return bool(self._errors.get(field))

    @property
    def error_count(self) -> int:
        """Total number of messages across all fields."""
        return sum(len(messages) for messages in self._errors.values())

    # -- Data --

    @property
    def valid_data(self) -> dict[str, Any]:
        return dict(self._valid_data)

    @property
    def validated_fields(self) -> list[str]:
        return list(self._validated_fields)

    # -- Building --

    def add_error(self, field: str, message: str) -> None:
        """Append *message* to *field*'s errors and mark it validated."""
        self._errors.setdefault(field, []).append(message)
        self.mark_validated(field)

    def add_valid_data(self, field: str, value: Any) -> None:
        self._valid_data[field] = value

    def mark_validated(self, field: str) -> None:
        self._validated_fields.setdefault(field, None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, e.g. for a JSON error response."""
        return {
            "valid": self.passes(),
            "errors": self.errors,
            "valid_data": self.valid_data,
            "validated_fields": self.validated_fields,
        }

    def __repr__(self) -> str:
        status = "passes" if self.passes() else f"fails ({self.error_count} errors)"
        return f"<ValidationResult {status}>"
