"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

Constructing a ConsoleAdapter configures structlog process-wide. It is meant
for the application composition root (container.get_logger()), never for
library defaults.
"""

from __future__ import annotations

import logging
import sys

import structlog

from src.infrastructure.logging.structlog_adapter import StructlogAdapter


class ConsoleAdapter(StructlogAdapter):
    """Console logger used in every environment.

    Args:
        use_json (bool): JSON output when True (CI/testing/production),
            human-readable when False (dev).
        level (str): Minimum level name that is emitted (DEBUG, INFO, ...).
            Unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        super().__init__(structlog.get_logger())
