"""Notification system core models.

Platform-agnostic models for urgency-routed dispatch. Callers build a
Notification, the dispatcher picks the handler, the handler reports a
DeliveryStatus.

Uses Pydantic BaseModel for:
- Runtime type validation of message and urgency
- Immutability (frozen models) and structural equality
"""

from enum import Enum
from pydantic import BaseModel


class Urgency(Enum):
    """Notification urgency levels.

    Closed set; each built-in handler claims exactly one level.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Notification(BaseModel):
    """Platform-agnostic notification message.

    Created once by the caller and never mutated. Two notifications with
    the same message and urgency compare equal.

    Attributes:
        message: Plain text message body (any string, empty included)
        urgency: Urgency level used for routing (default: MEDIUM)

    Example:
        notification = Notification(
            message="Disk usage above 90%",
            urgency=Urgency.HIGH,
        )
    """

    message: str
    urgency: Urgency = Urgency.MEDIUM

    model_config = {"frozen": True}


class DeliveryStatus(BaseModel):
    """Record of which handler delivered a notification.

    Attributes:
        notification: The notification the handler accepted
        deliverer: Name of the handler that processed it (e.g. "sms")

    Example:
        status = dispatcher.send(notification)
        logger.info("delivered", deliverer=status.deliverer)
    """

    notification: Notification
    deliverer: str

    model_config = {"frozen": True}
