"""Field validators used while building an operation result.

Each validator returns a FieldValidation carrying a pass/fail flag and a
human-readable message that callers typically feed into
OperationResult.mark_failure when the check fails.

Usage:
    from src.core.validation import validate_date, validate_string

    check = validate_string(payload.name, "name")
    if not check:
        result.mark_failure(check.message)
"""

from dataclasses import dataclass
from datetime import date, datetime

DATE_VALID_MESSAGE = "Date is valid"
STRING_VALID_MESSAGE = "String is not null"


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldValidation:
    """Outcome of a single field validation.

    Attributes:
        valid: Whether the value passed the check.
        message: Human-readable detail about the outcome.
    """

    valid: bool
    message: str

    def __bool__(self) -> bool:
        return self.valid


def _is_sentinel_date(value: date) -> bool:
    # datetime subclasses date, so it must be checked first
    if isinstance(value, datetime):
        naive = value.replace(tzinfo=None)
        return naive in (datetime.min, datetime.max)
    return value in (date.min, date.max)


def validate_date(value: date | None, field_name: str) -> FieldValidation:
    """Validate that a date is not set to the min or max value of its type.

    The min/max values act as "unset" markers. None is accepted; only the
    sentinels are rejected.

    Args:
        value: Date or datetime to validate, or None.
        field_name: Name of the field being validated.

    Returns:
        FieldValidation: valid=False with an explanatory message for a
        sentinel, valid=True with "Date is valid" otherwise.
    """
    if value is not None and _is_sentinel_date(value):
        return FieldValidation(
            valid=False,
            message=f"{value} is not a valid value for {field_name}",
        )
    return FieldValidation(valid=True, message=DATE_VALID_MESSAGE)


def validate_string(text: str | None, field_name: str) -> FieldValidation:
    """Validate that a string field is neither None nor empty.

    Whitespace-only text counts as present.

    Args:
        text: String to validate.
        field_name: Name of the field being validated.

    Returns:
        FieldValidation: valid=True with "String is not null" for non-empty
        text, valid=False naming the field otherwise.
    """
    if text:
        return FieldValidation(valid=True, message=STRING_VALID_MESSAGE)
    return FieldValidation(
        valid=False,
        message=f"There was no text found for the field '{field_name}'",
    )
