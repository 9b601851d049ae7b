"""Shared pytest fixtures."""

import pytest

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging
from infrastructure.services.plugins import get_handler_plugin_manager
from infrastructure.services.providers import (
    get_notification_dispatcher,
    get_settings,
)


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Configure structlog once; output is suppressed under pytest."""
    configure_logging(Settings())


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset lru_cache singletons so each test builds its own."""
    get_settings.cache_clear()
    get_notification_dispatcher.cache_clear()
    get_handler_plugin_manager.cache_clear()
    yield
    get_settings.cache_clear()
    get_notification_dispatcher.cache_clear()
    get_handler_plugin_manager.cache_clear()
