"""Test fixtures for notification infrastructure tests."""

from typing import Callable, Optional, Set

import pytest

from infrastructure.notifications.exceptions import DeliveryFailed
from infrastructure.notifications.handlers.base import NotificationHandler
from infrastructure.notifications.models import (
    DeliveryStatus,
    Notification,
    Urgency,
)
from infrastructure.notifications.results import DeliveryResult


class FakeHandler(NotificationHandler):
    """Configurable handler that records every call.

    Args:
        name: Handler name
        urgencies: Urgency levels accepted by supports()
        deliver_fn: Optional replacement for deliver(); receives the
            handler and the notification
    """

    def __init__(
        self,
        name: str,
        urgencies: Set[Urgency],
        deliver_fn: Optional[Callable] = None,
    ):
        self._name = name
        self.urgencies = set(urgencies)
        self.deliver_fn = deliver_fn
        self.supports_calls = []
        self.deliver_calls = []

    @property
    def name(self) -> str:
        return self._name

    def supports(self, notification: Notification) -> bool:
        self.supports_calls.append(notification)
        return notification.urgency in self.urgencies

    def deliver(self, notification: Notification) -> DeliveryResult:
        self.deliver_calls.append(notification)
        if self.deliver_fn is not None:
            return self.deliver_fn(self, notification)
        return DeliveryResult.delivered(
            DeliveryStatus(notification=notification, deliverer=self.name)
        )


@pytest.fixture
def notification_factory():
    """Factory for creating Notification instances.

    Example:
        notification = notification_factory(urgency=Urgency.HIGH)
    """

    def _factory(
        message: str = "Test message body",
        urgency: Urgency = Urgency.MEDIUM,
    ) -> Notification:
        return Notification(message=message, urgency=urgency)

    return _factory


@pytest.fixture
def handler_factory():
    """Factory for creating FakeHandler instances.

    Example:
        pager = handler_factory("pager", {Urgency.HIGH})
        broken = handler_factory("broken", {Urgency.HIGH}, deliver_fn=raise_error)
    """

    def _factory(
        name: str,
        urgencies: Set[Urgency],
        deliver_fn: Optional[Callable] = None,
    ) -> FakeHandler:
        return FakeHandler(name, urgencies, deliver_fn)

    return _factory


@pytest.fixture
def failing_deliver():
    """deliver_fn that reports a transient failure."""

    def _deliver(handler, notification):
        return DeliveryResult.transient_failure(
            "Provider unavailable", error_code="HTTP_503"
        )

    return _deliver


@pytest.fixture
def raising_deliver():
    """deliver_fn that raises DeliveryFailed."""

    def _deliver(handler, notification):
        raise DeliveryFailed(handler.name, "Connection refused", error_code="CONN_REFUSED")

    return _deliver


@pytest.fixture
def banded_handlers(handler_factory):
    """Three handlers partitioning the urgency levels: A=LOW, B=MEDIUM, C=HIGH."""
    return [
        handler_factory("A", {Urgency.LOW}),
        handler_factory("B", {Urgency.MEDIUM}),
        handler_factory("C", {Urgency.HIGH}),
    ]
