"""Tests for the SEN exception hierarchy."""
import pytest
from sqlalchemy.exc import IntegrityError

from sen.core.exceptions import (
    ColumnCountError,
    DatabaseError,
    RowImportError,
    ValidationError,
)


class TestColumnCountError:
    """Tests for ColumnCountError."""

    def test_is_validation_error(self):
        assert issubclass(ColumnCountError, ValidationError)

    def test_message_and_attributes(self):
        error = ColumnCountError(27, 3)
        assert error.expected == 27
        assert error.actual == 3
        assert str(error) == "Column count mismatch: expected 27 columns, found 3"


class TestRowImportError:
    """Tests for RowImportError formatting and classification."""

    def test_str_is_file_row_message(self):
        """The string form is the diagnostic line printed by the CLI."""
        error = RowImportError("baptisms.csv", 12, ValidationError("Invalid date"))
        assert str(error) == "baptisms.csv:12 - Invalid date"

    def test_message_falls_back_to_type_name(self):
        error = RowImportError("a.csv", 2, KeyError())
        assert error.message == "KeyError"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            RowImportError("a.csv", 2, ValueError("x"), "nonsense")

    def test_default_kind_is_unexpected(self):
        assert RowImportError("a.csv", 2, ValueError("x")).kind == "unexpected"

    @pytest.mark.parametrize(
        "error, kind",
        [
            (ColumnCountError(27, 2), "column_count"),
            (ValidationError("bad"), "data"),
            (DatabaseError("locked"), "storage"),
            (IntegrityError("stmt", {}, Exception("dup")), "storage"),
            (RuntimeError("boom"), "unexpected"),
        ],
    )
    def test_classify(self, error, kind):
        assert RowImportError.classify(error) == kind
