"""Notification handler abstract base class.

All handler implementations (Email, SMS, Chat) must implement this interface.
"""

from abc import ABC, abstractmethod

from infrastructure.notifications.models import Notification
from infrastructure.notifications.results import DeliveryResult


class NotificationHandler(ABC):
    """Abstract base class for notification handlers.

    Each handler delivers through one channel and claims the urgency
    levels it is willing to handle:
    - EmailHandler: LOW
    - ChatHandler: MEDIUM
    - SMSHandler: HIGH

    Handlers are stateless; the dispatcher decides which one runs.

    Example Implementation:
        class PagerHandler(NotificationHandler):

            @property
            def name(self) -> str:
                return "pager"

            def supports(self, notification: Notification) -> bool:
                return notification.urgency == Urgency.HIGH

            def deliver(self, notification: Notification) -> DeliveryResult:
                page_id = self._page(notification.message)
                return DeliveryResult.delivered(
                    DeliveryStatus(notification=notification, deliverer=self.name)
                )
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier (email, sms, chat).

        Returns:
            Name recorded as deliverer in DeliveryStatus and used for
            ordering and logging
        """

    @abstractmethod
    def supports(self, notification: Notification) -> bool:
        """Decide whether this handler accepts the notification.

        Must be a pure predicate over the notification's urgency.

        Args:
            notification: Notification to check

        Returns:
            True if the handler should attempt delivery
        """

    @abstractmethod
    def deliver(self, notification: Notification) -> DeliveryResult:
        """Deliver an accepted notification.

        Should report transport errors as a failed DeliveryResult (or raise
        DeliveryFailed) rather than aborting. On success the DeliveryStatus
        must name this handler as deliverer and reference the notification
        passed in.

        Args:
            notification: Notification previously accepted by supports()

        Returns:
            DeliveryResult describing the outcome
        """
