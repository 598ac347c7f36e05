"""Tests for error types."""

from cmdparts.errors import (
    CmdPartsError,
    InvalidFieldValueError,
    RuleDefinitionError,
    UnknownCommandError,
    ValidationError,
)


class TestErrors:
    """Test error hierarchy and attributes."""

    def test_hierarchy(self):
        assert issubclass(ValidationError, CmdPartsError)
        assert issubclass(InvalidFieldValueError, ValidationError)
        assert issubclass(RuleDefinitionError, CmdPartsError)
        assert issubclass(UnknownCommandError, CmdPartsError)

    def test_invalid_field_value_message(self):
        error = InvalidFieldValueError("bad value", field="pid", value=-1)
        assert str(error) == "pid: bad value"
        assert error.field == "pid"
        assert error.value == -1

    def test_invalid_field_value_without_field(self):
        error = InvalidFieldValueError("bad value")
        assert str(error) == "bad value"
        assert error.field is None
