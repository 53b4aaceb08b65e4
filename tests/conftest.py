"""Pytest configuration shared by all test suites.

Provides:
1. A mock logger implementing LoggerProtocol for result tests
2. Clean logger/settings caches around every test
"""

from unittest.mock import MagicMock

import pytest

from src.core.config import get_settings
from src.core.container import get_default_logger, get_logger


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol.

    ``bind``/``with_context`` return the same mock so bound calls can be
    asserted on the fixture directly.
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture(autouse=True)
def _clear_container_caches():
    """Reset cached singletons between tests.

    get_logger() reads get_settings() on every cache miss, so clearing both
    makes environment changes made inside a test visible to the container.
    """
    caches = (get_logger, get_default_logger, get_settings)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
