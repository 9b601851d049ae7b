"""Notification handler implementations."""

from typing import TYPE_CHECKING, List

from infrastructure.notifications.handlers.base import NotificationHandler
from infrastructure.notifications.handlers.chat import ChatHandler
from infrastructure.notifications.handlers.email import EmailHandler
from infrastructure.notifications.handlers.sms import SMSHandler
from infrastructure.services.plugins import hookimpl

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


@hookimpl
def register_notification_handlers(settings: "Settings") -> List[NotificationHandler]:
    """Provide the built-in email, SMS and chat handlers."""
    return [EmailHandler(), SMSHandler(), ChatHandler()]


__all__ = [
    "NotificationHandler",
    "ChatHandler",
    "EmailHandler",
    "SMSHandler",
]
