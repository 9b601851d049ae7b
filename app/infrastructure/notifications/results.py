"""Delivery result dataclass.

Typed outcome returned by NotificationHandler.deliver(). The dispatcher
inspects the status instead of intercepting exceptions to decide whether
to stop or fall through to the next handler.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from infrastructure.notifications.models import DeliveryStatus


class DeliveryResultStatus(Enum):
    """Outcome of a single delivery attempt.

    Attributes:
        DELIVERED: Handler completed delivery
        TRANSIENT_FAILURE: Failure that may succeed later (network, rate limit)
        PERMANENT_FAILURE: Failure that will not succeed (bad input, bad result)
        TIMED_OUT: Handler did not finish within the dispatcher timeout
    """

    DELIVERED = "delivered"
    TRANSIENT_FAILURE = "transient_failure"
    PERMANENT_FAILURE = "permanent_failure"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class DeliveryResult:
    """Uniform result returned from a delivery attempt.

    Attributes:
        status: DeliveryResultStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        delivery_status: Optional[DeliveryStatus] -- set on success only
        error_code: Optional[str] -- optional machine error code
    """

    status: DeliveryResultStatus
    message: str
    delivery_status: Optional[DeliveryStatus] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """True if the handler delivered the notification."""
        return self.status == DeliveryResultStatus.DELIVERED

    @classmethod
    def delivered(
        cls, delivery_status: DeliveryStatus, message: str = "delivered"
    ) -> "DeliveryResult":
        """Create a DELIVERED result carrying the delivery status.

        Args:
            delivery_status: Status naming the deliverer and notification
            message: Human-friendly success message

        Returns:
            DeliveryResult with DELIVERED status
        """
        return cls(
            status=DeliveryResultStatus.DELIVERED,
            message=message,
            delivery_status=delivery_status,
        )

    @classmethod
    def transient_failure(
        cls, message: str, error_code: Optional[str] = None
    ) -> "DeliveryResult":
        """Create a transient (retryable) failure result.

        Use for failures that may succeed later, such as:
        - Network timeouts
        - Rate limiting
        - Temporary provider unavailability
        """
        return cls(
            status=DeliveryResultStatus.TRANSIENT_FAILURE,
            message=message,
            error_code=error_code,
        )

    @classmethod
    def permanent_failure(
        cls, message: str, error_code: Optional[str] = None
    ) -> "DeliveryResult":
        """Create a permanent (non-retryable) failure result.

        Use for failures that will not succeed on retry, such as:
        - Invalid recipient or payload
        - Authentication failures
        - A handler returning a malformed result
        """
        return cls(
            status=DeliveryResultStatus.PERMANENT_FAILURE,
            message=message,
            error_code=error_code,
        )

    @classmethod
    def timed_out(cls, message: str) -> "DeliveryResult":
        """Create a TIMED_OUT result."""
        return cls(
            status=DeliveryResultStatus.TIMED_OUT,
            message=message,
            error_code="DELIVERY_TIMEOUT",
        )
