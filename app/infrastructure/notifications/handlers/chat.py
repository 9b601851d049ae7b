"""Chat handler for medium urgency notifications."""

import structlog
from infrastructure.notifications.handlers.base import NotificationHandler
from infrastructure.notifications.models import (
    DeliveryStatus,
    Notification,
    Urgency,
)
from infrastructure.notifications.results import DeliveryResult

logger = structlog.get_logger()


class ChatHandler(NotificationHandler):
    """Chat notification handler.

    Accepts MEDIUM urgency notifications only. Delivery is stubbed and the
    handler records itself as deliverer.
    """

    @property
    def name(self) -> str:
        """Handler identifier."""
        return "chat"

    def supports(self, notification: Notification) -> bool:
        """Accept notifications with a medium urgency level."""
        return notification.urgency == Urgency.MEDIUM

    def deliver(self, notification: Notification) -> DeliveryResult:
        """Post the notification to chat."""
        logger.info(
            "chat_delivered",
            urgency=notification.urgency.value,
            message_length=len(notification.message),
        )
        return DeliveryResult.delivered(
            DeliveryStatus(notification=notification, deliverer=self.name),
            message="Chat delivery recorded",
        )
