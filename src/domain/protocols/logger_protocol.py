"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context) and safe (no secrets).

Log Levels (standard 5-level hierarchy):
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events
    - WARNING: Degraded service, approaching limits
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure, immediate attention

Context Binding:
    Use bind() or with_context() to create operation-scoped loggers with
    permanent context (operation, entity_id) automatically included in all logs.

Security:
    - NEVER log passwords, tokens or API keys captured in exception text

Usage:
    from src.core.container import get_logger
    from src.domain.protocols.logger_protocol import LoggerProtocol

    # Basic logging
    logger: LoggerProtocol = get_logger()
    logger.info("Record saved", entity_id=str(entity_id))

    # Operation-scoped logging with bind()
    op_logger = logger.bind(operation="save_customer", entity_id=str(entity_id))
    result = OperationResult(logger=op_logger)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    Supports 5 standard log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    and context binding for operation-scoped logging.

    Implementations may enrich logs with timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message with structured context."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message with structured context."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message with structured context."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for unrecoverable failures.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Bound context is automatically included in all subsequent log calls.
        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.

        Example:
            op_logger = logger.bind(operation="import_orders", batch_id="b-42")
            result = OperationResult(logger=op_logger)
            result.mark_failure("Order 17 has no customer")
            # operation, batch_id included automatically
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind() - return logger with bound context.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
