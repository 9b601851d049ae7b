"""Notification dispatcher with urgency-based routing and fallthrough.

Routes each notification to the first handler that both supports it and
delivers it:
- Handlers are consulted in the order given at construction
- A handler that declines is skipped
- A handler that fails to deliver is treated like a decline
- Only total exhaustion is reported to the caller (NoHandlerFound)

Usage Example:
    from infrastructure.notifications import (
        NotificationDispatcher,
        Notification,
        Urgency,
        EmailHandler,
        SMSHandler,
        ChatHandler,
    )

    dispatcher = NotificationDispatcher(
        handlers=[EmailHandler(), SMSHandler(), ChatHandler()],
    )

    status = dispatcher.send(Notification(message="Disk full", urgency=Urgency.HIGH))
    logger.info("sent", deliverer=status.deliverer)  # "sms"
"""

import threading
from typing import Any, Dict, List, Optional, Sequence, Tuple

import structlog
from infrastructure.notifications.exceptions import (
    DeliveryAttempt,
    DeliveryFailed,
    NoHandlerFound,
)
from infrastructure.notifications.handlers.base import NotificationHandler
from infrastructure.notifications.models import DeliveryStatus, Notification
from infrastructure.notifications.results import DeliveryResult

logger = structlog.get_logger()


class _DeliveryTimedOut(Exception):
    """Raised by _call_deliver when the worker outlives the timeout."""


class NotificationDispatcher:
    """Single-delivery notification dispatcher.

    Walks an ordered sequence of handlers and delegates to the first one
    that accepts the notification and completes delivery. Keeps no state
    between calls.

    Attributes:
        handlers: Handlers in routing order
        timeout_seconds: Optional per-handler delivery timeout

    Example:
        dispatcher = NotificationDispatcher(
            handlers=[EmailHandler(), SMSHandler(), ChatHandler()],
            timeout_seconds=5.0,
        )

        try:
            status = dispatcher.send(notification)
        except NoHandlerFound as e:
            logger.error("undeliverable", attempts=len(e.attempts))
    """

    def __init__(
        self,
        handlers: Sequence[NotificationHandler],
        timeout_seconds: Optional[float] = None,
    ):
        """Initialize notification dispatcher.

        Args:
            handlers: Handlers in routing order
            timeout_seconds: Per-handler delivery timeout; None disables it
        """
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive: {timeout_seconds}")

        self.handlers: Tuple[NotificationHandler, ...] = tuple(handlers)
        self.timeout_seconds = timeout_seconds

        logger.info(
            "initialized_notification_dispatcher",
            handlers=list(self.handler_names),
            timeout_seconds=timeout_seconds,
        )

    @property
    def handler_names(self) -> Tuple[str, ...]:
        """Handler names in routing order."""
        return tuple(handler.name for handler in self.handlers)

    def send(self, notification: Notification) -> DeliveryStatus:
        """Deliver a notification through the first willing handler.

        Process:
        1. Skip handlers whose supports() returns False
        2. Ask the first supporting handler to deliver
        3. Return its DeliveryStatus on success, no further handlers consulted
        4. On failure record the attempt and continue with the next handler
        5. Raise NoHandlerFound when the sequence is exhausted

        Args:
            notification: Notification to send

        Returns:
            DeliveryStatus naming the handler that delivered it

        Raises:
            NoHandlerFound: No handler both supports and delivers the
                notification. Carries the failed attempts.
        """
        attempts: List[DeliveryAttempt] = []

        for handler in self.handlers:
            if not handler.supports(notification):
                logger.debug(
                    "handler_declined",
                    handler=handler.name,
                    urgency=notification.urgency.value,
                )
                continue

            result = self._attempt_delivery(handler, notification)
            if result.is_success:
                logger.info(
                    "notification_delivered",
                    handler=handler.name,
                    urgency=notification.urgency.value,
                    failed_attempts=len(attempts),
                )
                return result.delivery_status

            attempts.append(
                DeliveryAttempt(
                    handler=handler.name,
                    status=result.status,
                    message=result.message,
                    error_code=result.error_code,
                )
            )
            logger.warning(
                "handler_delivery_failed",
                handler=handler.name,
                status=result.status.value,
                error_code=result.error_code,
                error=result.message,
            )

        logger.error(
            "no_handler_found",
            urgency=notification.urgency.value,
            handlers=list(self.handler_names),
            failed_attempts=[a.handler for a in attempts],
        )
        raise NoHandlerFound(notification, attempts)

    def _attempt_delivery(
        self, handler: NotificationHandler, notification: Notification
    ) -> DeliveryResult:
        """Run one handler's deliver() and normalise the outcome.

        Exceptions, timeouts and malformed results all come back as failed
        DeliveryResults.

        Args:
            handler: Handler that accepted the notification
            notification: Notification to deliver

        Returns:
            DeliveryResult, successful only when it carries a valid status
        """
        try:
            result = self._call_deliver(handler, notification)
        except _DeliveryTimedOut:
            logger.warning(
                "handler_delivery_timed_out",
                handler=handler.name,
                timeout_seconds=self.timeout_seconds,
            )
            return DeliveryResult.timed_out(
                f"Delivery did not complete within {self.timeout_seconds}s"
            )
        except DeliveryFailed as e:
            return DeliveryResult.transient_failure(e.message, error_code=e.error_code)
        except Exception as e:
            logger.error(
                "handler_exception",
                handler=handler.name,
                error=str(e),
                exc_info=True,
            )
            return DeliveryResult.transient_failure(
                f"Handler exception: {str(e)}", error_code="HANDLER_EXCEPTION"
            )

        if not isinstance(result, DeliveryResult):
            return DeliveryResult.permanent_failure(
                f"Handler returned {type(result).__name__}, expected DeliveryResult",
                error_code="INVALID_DELIVERY_RESULT",
            )

        if result.is_success and not self._is_valid_status(
            result.delivery_status, handler, notification
        ):
            return DeliveryResult.permanent_failure(
                "Delivery status does not match the accepting handler and notification",
                error_code="INVALID_DELIVERY_STATUS",
            )

        return result

    def _call_deliver(
        self, handler: NotificationHandler, notification: Notification
    ) -> DeliveryResult:
        """Call deliver(), on a worker thread when a timeout is configured.

        The worker is a daemon thread. A delivery that outlives the timeout
        is abandoned, not cancelled, and does not hold up interpreter exit.
        Exceptions raised by deliver() are re-raised in the calling thread.

        Raises:
            _DeliveryTimedOut: The worker was still running at the timeout.
        """
        if self.timeout_seconds is None:
            return handler.deliver(notification)

        outcome: Dict[str, Any] = {}

        def run() -> None:
            try:
                outcome["result"] = handler.deliver(notification)
            except Exception as e:
                outcome["error"] = e

        worker = threading.Thread(
            target=run,
            daemon=True,
            name=f"notifier-deliver-{handler.name}",
        )
        worker.start()
        worker.join(self.timeout_seconds)

        if worker.is_alive():
            raise _DeliveryTimedOut()
        if "error" in outcome:
            raise outcome["error"]
        return outcome.get("result")

    @staticmethod
    def _is_valid_status(
        delivery_status: Optional[DeliveryStatus],
        handler: NotificationHandler,
        notification: Notification,
    ) -> bool:
        return (
            isinstance(delivery_status, DeliveryStatus)
            and delivery_status.deliverer == handler.name
            and delivery_status.notification == notification
        )
