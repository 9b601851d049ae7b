"""Unit tests for EmailHandler."""

import pytest

from infrastructure.notifications.handlers.email import EmailHandler
from infrastructure.notifications.models import Notification, Urgency


@pytest.mark.unit
class TestEmailHandler:
    """Tests for EmailHandler implementation."""

    @pytest.fixture
    def email_handler(self):
        return EmailHandler()

    def test_name(self, email_handler):
        """Handler name returns 'email'."""
        assert email_handler.name == "email"

    @pytest.mark.parametrize(
        "urgency,expected",
        [(Urgency.LOW, True), (Urgency.MEDIUM, False), (Urgency.HIGH, False)],
    )
    def test_supports_low_urgency_only(self, email_handler, urgency, expected):
        notification = Notification(message="x", urgency=urgency)

        assert email_handler.supports(notification) is expected

    def test_deliver_tags_itself(self, email_handler):
        notification = Notification(message="Weekly report", urgency=Urgency.LOW)

        result = email_handler.deliver(notification)

        assert result.is_success
        assert result.delivery_status.deliverer == "email"
        assert result.delivery_status.notification == notification
