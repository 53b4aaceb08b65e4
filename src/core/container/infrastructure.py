"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON) for the application
- Logging (stdlib-routed, non-configuring) for library defaults

Settings are loaded lazily inside factories so importing the container never
validates environment variables.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

DEFAULT_LOGGER_NAME = "src.core.operation_result"


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Opt-in composition root: configures structlog process-wide.
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    The returned logger has ``app`` and ``environment`` bound.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.core.config import get_settings
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )

    use_json = env in {"testing", "ci", "production"}
    adapter = ConsoleAdapter(use_json=use_json, level=settings.log_level)
    return adapter.bind(app=settings.app_name, environment=env)


@lru_cache()
def get_default_logger() -> "LoggerProtocol":
    """Return the logger operation results use when none is injected.

    Reads no settings and never configures structlog; output goes through
    the stdlib ``logging`` tree, so the host application decides what is shown.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.structlog_adapter import stdlib_adapter

    return stdlib_adapter(DEFAULT_LOGGER_NAME)
