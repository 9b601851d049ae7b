"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.services.plugins import discover_handlers


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """
    Get application-scoped notification dispatcher singleton.

    Handlers are discovered once through the plugin manager and ordered by
    settings.notifications.NOTIFIER_HANDLER_ORDER.

    Returns:
        NotificationDispatcher: Cached dispatcher with the discovered handlers.
    """
    settings = get_settings()
    return NotificationDispatcher(
        handlers=discover_handlers(settings),
        timeout_seconds=settings.notifications.NOTIFIER_HANDLER_TIMEOUT_SECONDS,
    )
