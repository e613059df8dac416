"""Tests for the sacrament column layout."""
import pytest

from sen.core.exceptions import ColumnCountError
from sen.pipeline.columns import COLUMN_COUNT, SacramentColumn, validate_row


class TestSacramentColumn:
    """Test the positional layout."""

    def test_layout_is_contiguous(self):
        assert [int(c) for c in SacramentColumn] == list(range(COLUMN_COUNT))

    def test_identity_columns_come_first(self):
        assert SacramentColumn.LAST_NAME == 0
        assert SacramentColumn.FIRST_NAME == 1
        assert SacramentColumn.RACE_ID == 2
        assert SacramentColumn.SEX == 3

    def test_notes_is_last(self):
        assert SacramentColumn.NOTES == COLUMN_COUNT - 1


class TestValidateRow:
    """Test row width validation."""

    def test_exact_width_passes(self):
        validate_row([""] * COLUMN_COUNT)

    def test_extra_columns_allowed(self):
        validate_row([""] * (COLUMN_COUNT + 3))

    def test_narrow_row_raises(self):
        with pytest.raises(ColumnCountError) as exc_info:
            validate_row(["John", "Smith"])
        assert exc_info.value.expected == COLUMN_COUNT
        assert exc_info.value.actual == 2
