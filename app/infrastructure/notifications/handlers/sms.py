"""SMS handler for high urgency notifications."""

import structlog
from infrastructure.notifications.handlers.base import NotificationHandler
from infrastructure.notifications.models import (
    DeliveryStatus,
    Notification,
    Urgency,
)
from infrastructure.notifications.results import DeliveryResult

logger = structlog.get_logger()

# Provider limit for a single SMS body
SMS_MAX_LENGTH = 1600


def format_sms_body(message: str) -> str:
    """Truncate a message to the SMS length limit.

    Args:
        message: Notification body.

    Returns:
        The message, cut to SMS_MAX_LENGTH characters with a trailing
        "..." when it was longer.
    """
    if len(message) <= SMS_MAX_LENGTH:
        return message
    return message[: SMS_MAX_LENGTH - 3] + "..."


class SMSHandler(NotificationHandler):
    """SMS notification handler.

    Accepts HIGH urgency notifications only. Delivery is stubbed; the body
    is still formatted to the SMS length limit so oversized messages are
    visible in the logs.
    """

    @property
    def name(self) -> str:
        """Handler identifier."""
        return "sms"

    def supports(self, notification: Notification) -> bool:
        """Accept notifications with a high urgency level."""
        return notification.urgency == Urgency.HIGH

    def deliver(self, notification: Notification) -> DeliveryResult:
        """Send the notification via SMS.

        Args:
            notification: Notification to send.

        Returns:
            DeliveryResult tagging this handler as deliverer.
        """
        body = format_sms_body(notification.message)
        if len(body) < len(notification.message):
            logger.warning(
                "sms_message_truncated",
                original_length=len(notification.message),
                truncated_length=len(body),
            )

        logger.info(
            "sms_delivered",
            urgency=notification.urgency.value,
            message_length=len(body),
        )
        return DeliveryResult.delivered(
            DeliveryStatus(notification=notification, deliverer=self.name),
            message="SMS delivery recorded",
        )
