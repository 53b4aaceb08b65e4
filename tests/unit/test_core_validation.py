"""Unit tests for core validation functions.

Tests cover:
- validate_date: datetime/date sentinels, aware datetimes, None, normal values
- validate_string: None, empty string, whitespace, normal text
- FieldValidation truthiness

Architecture:
- Unit tests for pure validation functions
- No mocking required (pure functions)
"""

from datetime import UTC, date, datetime

import pytest

from src.core.validation import FieldValidation, validate_date, validate_string


@pytest.mark.unit
class TestValidateDate:
    """Test validate_date function."""

    @pytest.mark.parametrize("sentinel", [datetime.min, datetime.max])
    def test_validate_date_fails_with_datetime_sentinels(self, sentinel):
        """Test validation fails for datetime min and max."""
        result = validate_date(sentinel, "created_at")

        assert result.valid is False
        assert result.message == f"{sentinel} is not a valid value for created_at"

    @pytest.mark.parametrize("sentinel", [date.min, date.max])
    def test_validate_date_fails_with_date_sentinels(self, sentinel):
        """Test validation fails for date min and max."""
        result = validate_date(sentinel, "birthday")

        assert result.valid is False
        assert "is not a valid value for birthday" in result.message

    def test_validate_date_fails_with_aware_max(self):
        """Test timezone-aware sentinels are still rejected."""
        result = validate_date(datetime.max.replace(tzinfo=UTC), "expires_at")

        assert result.valid is False

    def test_validate_date_message_format(self):
        """Test failure message embeds the value and field name."""
        result = validate_date(datetime.min, "created_at")

        assert result.message == "0001-01-01 00:00:00 is not a valid value for created_at"

    def test_validate_date_passes_with_normal_datetime(self):
        """Test validation passes with a concrete datetime."""
        result = validate_date(datetime(2024, 5, 17, 12, 30), "created_at")

        assert result.valid is True
        assert result.message == "Date is valid"

    def test_validate_date_passes_with_normal_date(self):
        """Test validation passes with a concrete date."""
        result = validate_date(date(2024, 5, 17), "due")

        assert result.valid is True
        assert result.message == "Date is valid"

    def test_validate_date_passes_with_none(self):
        """Test an absent optional date is not rejected."""
        result = validate_date(None, "due")

        assert result.valid is True
        assert result.message == "Date is valid"

    def test_validate_date_passes_next_to_sentinel(self):
        """Test only exact sentinel equality fails."""
        result = validate_date(datetime(1, 1, 1, 0, 0, 1), "created_at")

        assert result.valid is True


@pytest.mark.unit
class TestValidateString:
    """Test validate_string function."""

    def test_validate_string_passes_with_text(self):
        """Test validation passes with non-empty text."""
        result = validate_string("hello", "name")

        assert result.valid is True
        assert result.message == "String is not null"

    def test_validate_string_fails_with_empty(self):
        """Test validation fails with empty string."""
        result = validate_string("", "name")

        assert result.valid is False
        assert result.message == "There was no text found for the field 'name'"

    def test_validate_string_fails_with_none(self):
        """Test validation fails with None."""
        result = validate_string(None, "name")

        assert result.valid is False
        assert result.message == "There was no text found for the field 'name'"

    def test_validate_string_passes_with_whitespace(self):
        """Test whitespace-only text counts as present."""
        result = validate_string("   ", "name")

        assert result.valid is True


@pytest.mark.unit
class TestFieldValidation:
    """Test FieldValidation value object."""

    def test_truthiness_follows_valid(self):
        """Test FieldValidation is truthy only when valid."""
        assert FieldValidation(valid=True, message="ok")
        assert not FieldValidation(valid=False, message="bad")

    def test_is_immutable(self):
        """Test FieldValidation cannot be modified."""
        check = FieldValidation(valid=True, message="ok")

        with pytest.raises(AttributeError):
            check.valid = False  # type: ignore[misc]
