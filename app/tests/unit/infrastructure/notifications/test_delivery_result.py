"""Unit tests for DeliveryResult and delivery exceptions."""

import pytest

from infrastructure.notifications.exceptions import (
    DeliveryAttempt,
    DeliveryFailed,
    NoHandlerFound,
)
from infrastructure.notifications.models import DeliveryStatus, Notification
from infrastructure.notifications.results import DeliveryResult, DeliveryResultStatus


@pytest.mark.unit
class TestDeliveryResult:
    """Tests for DeliveryResult constructors."""

    def test_delivered(self):
        status = DeliveryStatus(notification=Notification(message="x"), deliverer="chat")

        result = DeliveryResult.delivered(status)

        assert result.is_success
        assert result.status == DeliveryResultStatus.DELIVERED
        assert result.delivery_status is status
        assert result.error_code is None

    def test_transient_failure(self):
        result = DeliveryResult.transient_failure("rate limited", error_code="HTTP_429")

        assert not result.is_success
        assert result.status == DeliveryResultStatus.TRANSIENT_FAILURE
        assert result.delivery_status is None
        assert result.error_code == "HTTP_429"

    def test_permanent_failure(self):
        result = DeliveryResult.permanent_failure("bad payload")

        assert not result.is_success
        assert result.status == DeliveryResultStatus.PERMANENT_FAILURE
        assert result.message == "bad payload"

    def test_timed_out(self):
        result = DeliveryResult.timed_out("too slow")

        assert not result.is_success
        assert result.status == DeliveryResultStatus.TIMED_OUT
        assert result.error_code == "DELIVERY_TIMEOUT"


@pytest.mark.unit
class TestDeliveryExceptions:
    """Tests for DeliveryFailed and NoHandlerFound."""

    def test_delivery_failed_defaults_error_code(self):
        error = DeliveryFailed("sms", "gateway down")

        assert error.handler == "sms"
        assert error.message == "gateway down"
        assert error.error_code == "DELIVERY_FAILED"
        assert str(error) == "gateway down"

    def test_no_handler_found_copies_attempts(self):
        notification = Notification(message="x")
        attempts = [
            DeliveryAttempt(
                handler="sms",
                status=DeliveryResultStatus.TRANSIENT_FAILURE,
                message="gateway down",
            )
        ]

        error = NoHandlerFound(notification, attempts)
        attempts.clear()

        assert error.notification == notification
        assert len(error.attempts) == 1
        assert str(error) == "No handler found for notification"

    def test_no_handler_found_without_attempts(self):
        error = NoHandlerFound(Notification(message="x"))

        assert error.attempts == []
