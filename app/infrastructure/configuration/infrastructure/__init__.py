"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.notifications import (
    NotificationSettings,
)

__all__ = [
    "NotificationSettings",
]
