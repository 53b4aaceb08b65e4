"""Structlog logging adapter that leaves global configuration alone.

StructlogAdapter forwards LoggerProtocol calls to a wrapped structlog logger.
It never calls ``structlog.configure``, so it is safe to use from library code
running inside a host application that owns its own logging setup.

stdlib_adapter() is the default used by operation results: events are routed
into the stdlib ``logging`` tree under the given name, so the host's level and
handlers decide what is emitted (DEBUG is dropped unless enabled).

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class StructlogAdapter:
    """LoggerProtocol implementation over an existing structlog logger.

    Args:
        logger: Bound structlog logger that receives every call.
    """

    def __init__(self, logger: Any) -> None:
        self._logger = logger

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Message text.
            error (Exception | None): Optional exception; adds error_type and
                error_message fields.
            **context: Structured key-value context.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> StructlogAdapter:
        """Return new adapter of the same type with bound context.

        The new adapter skips ``__init__`` so subclasses that configure
        structlog on construction do not configure it again.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            StructlogAdapter: New adapter instance with bound context.
        """
        bound_adapter = object.__new__(type(self))
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> StructlogAdapter:
        """Alias for bind()."""
        return self.bind(**context)


def stdlib_adapter(name: str) -> StructlogAdapter:
    """Build an adapter that renders into the stdlib logger ``name``.

    Uses ``structlog.wrap_logger`` with explicit processors, so structlog's
    global configuration is neither read for processors nor modified.

    Args:
        name: stdlib logger name.

    Returns:
        StructlogAdapter: Adapter over a stdlib-backed structlog logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return StructlogAdapter(logger)
