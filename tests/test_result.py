"""Tests for verdict.result — the ValidationResult accumulator."""

from verdict.result import ValidationResult


class TestStatus:
    def test_empty_passes(self) -> None:
        result = ValidationResult()
        assert result.passes() is True
        assert result.fails() is False
        assert result.is_valid is True
        assert bool(result) is True

    def test_error_fails(self) -> None:
        result = ValidationResult()
        result.add_error("email", "bad")
        assert result.passes() is False
        assert result.fails() is True
        assert not result

    def test_valid_data_does_not_affect_status(self) -> None:
        result = ValidationResult(errors={"a": ["x"]})
        result.add_valid_data("b", 1)
        assert result.fails()

    def test_validated_fields_do_not_affect_status(self) -> None:
        result = ValidationResult()
        result.mark_validated("a")
        assert result.passes()


class TestErrors:
    def test_order_preserved(self) -> None:
        result = ValidationResult()
        result.add_error("name", "first")
        result.add_error("name", "second")
        assert result.field_errors("name") == ["first", "second"]
        assert result.error("name") == "first"

    def test_first_errors(self) -> None:
        result = ValidationResult()
        result.add_error("a", "a1")
        result.add_error("a", "a2")
        result.add_error("b", "b1")
        assert result.first_errors() == {"a": "a1", "b": "b1"}

    def test_error_missing_field(self) -> None:
        result = ValidationResult()
        assert result.error("nope") is None
        assert result.field_errors("nope") == []
        assert result.has_error("nope") is False

    def test_error_count(self) -> None:
        result = ValidationResult(errors={"a": ["1", "2"], "b": ["3"]})
        assert result.error_count == 3

    def test_add_error_marks_validated_once(self) -> None:
        result = ValidationResult()
        result.add_error("a", "1")
        result.add_error("b", "2")
        result.add_error("a", "3")
        assert result.validated_fields == ["a", "b"]

    def test_errors_returns_copy(self) -> None:
        result = ValidationResult()
        result.add_error("a", "1")
        result.errors["a"].append("tampered")
        assert result.field_errors("a") == ["1"]


class TestValidData:
    def test_upsert(self) -> None:
        result = ValidationResult()
        result.add_valid_data("age", 1)
        result.add_valid_data("age", 2)
        assert result.valid_data == {"age": 2}

    def test_returns_copy(self) -> None:
        result = ValidationResult(valid_data={"a": 1})
        result.valid_data["b"] = 2
        assert result.valid_data == {"a": 1}

    def test_constructor_dedupes_validated_fields(self) -> None:
        result = ValidationResult(validated_fields=["a", "b", "a"])
        assert result.validated_fields == ["a", "b"]


class TestToDict:
    def test_shape(self) -> None:
        result = ValidationResult()
        result.add_error("email", "bad")
        result.add_valid_data("age", 30)
        result.mark_validated("age")
        assert result.to_dict() == {
            "valid": False,
            "errors": {"email": ["bad"]},
            "valid_data": {"age": 30},
            "validated_fields": ["email", "age"],
        }

    def test_repr(self) -> None:
        assert repr(ValidationResult()) == "<ValidationResult passes>"
        assert "1 errors" in repr(ValidationResult(errors={"a": ["x"]}))
