"""Email handler for low urgency notifications."""

import structlog
from infrastructure.notifications.handlers.base import NotificationHandler
from infrastructure.notifications.models import (
    DeliveryStatus,
    Notification,
    Urgency,
)
from infrastructure.notifications.results import DeliveryResult

logger = structlog.get_logger()


class EmailHandler(NotificationHandler):
    """Email notification handler.

    Accepts LOW urgency notifications only. Delivery is stubbed: nothing
    leaves the process and the handler records itself as deliverer.
    """

    @property
    def name(self) -> str:
        """Handler identifier."""
        return "email"

    def supports(self, notification: Notification) -> bool:
        """Accept notifications with a low urgency level.

        Args:
            notification: The notification to check.

        Returns:
            True if the notification's urgency is LOW, False otherwise.
        """
        return notification.urgency == Urgency.LOW

    def deliver(self, notification: Notification) -> DeliveryResult:
        """Send the notification via email.

        Args:
            notification: Notification to send.

        Returns:
            DeliveryResult tagging this handler as deliverer.
        """
        subject = f"[{notification.urgency.name}] Notification"
        logger.info(
            "email_delivered",
            subject=subject,
            urgency=notification.urgency.value,
        )
        return DeliveryResult.delivered(
            DeliveryStatus(notification=notification, deliverer=self.name),
            message="Email delivery recorded",
        )
