"""Infrastructure configuration module - public API.

Centralized configuration management for the notifier using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    NotificationSettings: Dispatcher settings class (for testing)

Example:
    ```python
    from infrastructure.services.providers import get_settings

    settings = get_settings()

    timeout = settings.notifications.NOTIFIER_HANDLER_TIMEOUT_SECONDS
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.notifications import (
    NotificationSettings,
)

__all__ = ["Settings", "NotificationSettings"]
