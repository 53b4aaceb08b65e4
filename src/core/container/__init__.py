"""Container module - Centralized dependency injection.

Re-exports factory functions so callers import from one place:

    from src.core.container import get_logger

The container is organized into modules by concern:
- infrastructure: Core services (logging)
"""

# Infrastructure services
from src.core.container.infrastructure import get_default_logger, get_logger

__all__ = ["get_default_logger", "get_logger"]
