"""Notification dispatch exceptions."""

from dataclasses import dataclass
from typing import List, Optional

from infrastructure.notifications.models import Notification
from infrastructure.notifications.results import DeliveryResultStatus


class DeliveryFailed(Exception):
    """Raised by a handler that accepted a notification but could not deliver it.

    The dispatcher converts it into a failed DeliveryResult and moves on
    to the next handler; it never reaches the caller of send().

    Args:
        handler: Name of the failing handler
        message: Human-friendly failure description
        error_code: Optional machine error code
    """

    def __init__(
        self,
        handler: str,
        message: str,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.handler = handler
        self.message = message
        self.error_code = error_code or "DELIVERY_FAILED"


@dataclass(frozen=True)
class DeliveryAttempt:
    """A handler that accepted the notification but failed to deliver it."""

    handler: str
    status: DeliveryResultStatus
    message: str
    error_code: Optional[str] = None


class NoHandlerFound(Exception):
    """Raised when no handler both supports and delivers a notification.

    Attributes:
        notification: The notification that could not be delivered
        attempts: Failed attempts in dispatch order, empty when no
            handler supported the notification
    """

    def __init__(
        self,
        notification: Notification,
        attempts: Optional[List[DeliveryAttempt]] = None,
    ):
        super().__init__("No handler found for notification")
        self.notification = notification
        self.attempts = list(attempts or [])
