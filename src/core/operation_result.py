"""Operation result types for reporting the outcome of a data operation.

An operation result collects a success flag and human-readable messages as a
unit of work moves through a call chain. Callers catch exceptions at their
boundary and funnel them in through the exception-accepting mutators instead
of re-raising, then read ``success`` / ``message`` at the end.

Two shapes are provided:
- OperationResult: success flag + ordered messages
- ModelOperationResult[T]: an OperationResult composed with a typed payload

Instances are owned by a single call chain. They are NOT safe for concurrent
mutation from multiple threads.

Usage:
    from src.core.operation_result import OperationResult

    result = OperationResult()
    try:
        repository.save(entity)
    except DatabaseError as e:
        result.mark_failure(e)

    if not result.success:
        print(result.message)
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from src.core.validation import FieldValidation, validate_date, validate_string

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

T = TypeVar("T")  # Payload type

FailureDetail = str | Iterable[str] | BaseException | None


class ResultLike(Protocol):
    """Anything that can be merged into an operation result."""

    @property
    def success(self) -> bool: ...

    @property
    def messages(self) -> list[str]: ...


def get_exception_message(error: BaseException) -> str:
    """Return the message text of the innermost cause of an exception.

    Follows ``__cause__`` links (``raise ... from ...``) until an exception
    without a further cause is reached. Implicit ``__context__`` chaining is
    not wrapping and is ignored. Outer wrapping context is discarded.

    Args:
        error: Exception to unwind.

    Returns:
        str: Innermost exception text, or its class name when the text is empty.
    """
    seen: set[int] = {id(error)}
    current = error
    while current.__cause__ is not None and id(current.__cause__) not in seen:
        current = current.__cause__
        seen.add(id(current))

    # KeyError.__str__ quotes its key
    if (
        isinstance(current, KeyError)
        and len(current.args) == 1
        and isinstance(current.args[0], str)
    ):
        return current.args[0] or type(current).__name__
    return str(current) or type(current).__name__


def _get_default_logger() -> "LoggerProtocol":
    from src.core.container import get_default_logger

    return get_default_logger()


class OperationResult:
    """Mutable record of whether a data operation succeeded.

    Attributes:
        success: False once any step has been marked as failed.
        messages: Copy of the accumulated messages, in insertion order.
        message: All messages concatenated without a separator.
    """

    __slots__ = ("_success", "_messages", "_logger")

    def __init__(self, *, logger: "LoggerProtocol | None" = None) -> None:
        """Create a successful result with no messages.

        Args:
            logger: Logger for diagnostics. Defaults to a logger that routes
                through stdlib logging without configuring anything.
        """
        self._success = True
        self._messages: list[str] = []
        self._logger = logger if logger is not None else _get_default_logger()

    @classmethod
    def from_exception(
        cls, error: BaseException, *, logger: "LoggerProtocol | None" = None
    ) -> OperationResult:
        """Create a failed result holding the innermost text of ``error``."""
        result = cls(logger=logger)
        result.mark_failure(error)
        return result

    @property
    def success(self) -> bool:
        return self._success

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    @property
    def message(self) -> str:
        return "".join(self._messages)

    def add_messages(self, messages: Iterable[str]) -> None:
        """Append messages in order. Does not change ``success``."""
        self._messages.extend(messages)

    def add_message(self, message: str | BaseException) -> None:
        """Append a message, or the innermost text of an exception.

        Does not change ``success``.
        """
        if isinstance(message, BaseException):
            self.add_exception_message(message)
            return
        self._messages.append(message)

    def add_exception_message(self, error: BaseException) -> None:
        """Append the innermost message text of ``error``."""
        text = get_exception_message(error)
        self._logger.debug(
            "Exception captured in operation result",
            error_type=type(error).__name__,
            error_message=text,
        )
        self._messages.append(text)

    def mark_failure(self, detail: FailureDetail = None) -> None:
        """Mark the operation as failed, optionally recording why.

        Args:
            detail: Nothing, a message, several messages, or an exception
                whose innermost text is recorded.
        """
        self._success = False
        self._logger.debug("Operation result marked as failed")

        if detail is None:
            return
        if isinstance(detail, (str, BaseException)):
            self.add_message(detail)
        else:
            self.add_messages(detail)

    def merge_from(self, other: ResultLike) -> None:
        """Merge another result into this one.

        Messages from ``other`` are appended in order. Success is taken from
        ``other`` only while this result is still successful; failure is
        never cleared by merging.
        """
        self._messages.extend(other.messages)
        if self._success:
            self._success = other.success
            if not self._success:
                self._logger.debug(
                    "Operation result failed by merge",
                    merged_messages=len(other.messages),
                )

    @staticmethod
    def validate_date(value: date | None, field_name: str) -> FieldValidation:
        """Check that a date is not the min/max sentinel of its type."""
        return validate_date(value, field_name)

    @staticmethod
    def validate_string(text: str | None, field_name: str) -> FieldValidation:
        """Check that a string field holds text."""
        return validate_string(text, field_name)

    def __repr__(self) -> str:
        return f"OperationResult(success={self._success!r}, messages={self._messages!r})"


class ModelOperationResult(Generic[T]):
    """Operation result carrying a typed payload.

    Composes an OperationResult for the success flag and messages; every
    mutator delegates to it.

    Attributes:
        model: Payload of the operation, None unless supplied.
        result: The composed OperationResult.
    """

    __slots__ = ("_result", "model")

    def __init__(
        self, model: T | None = None, *, logger: "LoggerProtocol | None" = None
    ) -> None:
        self._result = OperationResult(logger=logger)
        self.model: T | None = model

    @classmethod
    def from_exception(
        cls, error: BaseException, *, logger: "LoggerProtocol | None" = None
    ) -> ModelOperationResult[T]:
        """Create a failed result with no payload from ``error``."""
        result: ModelOperationResult[T] = cls(logger=logger)
        result.mark_failure(error)
        return result

    @property
    def result(self) -> OperationResult:
        return self._result

    @property
    def success(self) -> bool:
        return self._result.success

    @property
    def messages(self) -> list[str]:
        return self._result.messages

    @property
    def message(self) -> str:
        return self._result.message

    def add_messages(self, messages: Iterable[str]) -> None:
        self._result.add_messages(messages)

    def add_message(self, message: str | BaseException) -> None:
        self._result.add_message(message)

    def add_exception_message(self, error: BaseException) -> None:
        self._result.add_exception_message(error)

    def mark_failure(self, detail: FailureDetail = None) -> None:
        self._result.mark_failure(detail)

    def merge_from(self, other: ResultLike) -> None:
        """Merge another result into this one.

        Same message and success rules as OperationResult.merge_from. When
        ``other`` carries a payload, ``model`` is always replaced by it, even
        if ``other`` failed.
        """
        self._result.merge_from(other)
        if isinstance(other, ModelOperationResult):
            self.model = other.model

    @staticmethod
    def validate_date(value: date | None, field_name: str) -> FieldValidation:
        return validate_date(value, field_name)

    @staticmethod
    def validate_string(text: str | None, field_name: str) -> FieldValidation:
        return validate_string(text, field_name)

    def __repr__(self) -> str:
        return (
            f"ModelOperationResult(success={self.success!r}, "
            f"messages={self._result.messages!r}, model={self.model!r})"
        )
