"""Urgency-routed notification dispatch.

Delivers each notification through exactly one channel handler:
- Handlers declare which urgency they support
- The dispatcher tries handlers in configured order
- A failed delivery falls through to the next supporting handler
- Exhaustion is reported as NoHandlerFound

Usage:
    from infrastructure.notifications import (
        Notification,
        Urgency,
        NotificationDispatcher,
        EmailHandler,
        SMSHandler,
        ChatHandler,
    )

    dispatcher = NotificationDispatcher(
        handlers=[EmailHandler(), SMSHandler(), ChatHandler()]
    )

    status = dispatcher.send(
        Notification(message="Deploy finished", urgency=Urgency.LOW)
    )
    logger.info("notification_sent", deliverer=status.deliverer)  # "email"
"""

# Models
from infrastructure.notifications.models import (
    Notification,
    DeliveryStatus,
    Urgency,
)
from infrastructure.notifications.results import (
    DeliveryResult,
    DeliveryResultStatus,
)
from infrastructure.notifications.exceptions import (
    DeliveryAttempt,
    DeliveryFailed,
    NoHandlerFound,
)

# Dispatcher
from infrastructure.notifications.dispatcher import NotificationDispatcher

# Handler interface and implementations
from infrastructure.notifications.handlers import (
    NotificationHandler,
    ChatHandler,
    EmailHandler,
    SMSHandler,
)

__all__ = [
    # Models
    "Notification",
    "DeliveryStatus",
    "Urgency",
    "DeliveryResult",
    "DeliveryResultStatus",
    # Errors
    "DeliveryAttempt",
    "DeliveryFailed",
    "NoHandlerFound",
    # Dispatcher
    "NotificationDispatcher",
    # Handlers
    "NotificationHandler",
    "ChatHandler",
    "EmailHandler",
    "SMSHandler",
]
