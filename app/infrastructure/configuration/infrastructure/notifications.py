"""Notification dispatch infrastructure settings."""

from typing import List, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class NotificationSettings(InfrastructureSettings):
    """Notification dispatcher configuration.

    Environment Variables:
        NOTIFIER_HANDLER_ORDER: JSON list of handler names in routing order
            (default: ["email", "sms", "chat"])
        NOTIFIER_HANDLER_TIMEOUT_SECONDS: Per-handler delivery timeout in
            seconds (default: unset, no timeout)
        NOTIFIER_PLUGIN_PATHS: JSON list of base paths scanned for handler
            plugins (default: [])

    Example:
        ```python
        from infrastructure.services.providers import get_settings

        settings = get_settings()

        order = settings.notifications.NOTIFIER_HANDLER_ORDER
        timeout = settings.notifications.NOTIFIER_HANDLER_TIMEOUT_SECONDS
        ```
    """

    NOTIFIER_HANDLER_ORDER: List[str] = Field(
        default_factory=lambda: ["email", "sms", "chat"],
        alias="NOTIFIER_HANDLER_ORDER",
    )
    NOTIFIER_HANDLER_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None, alias="NOTIFIER_HANDLER_TIMEOUT_SECONDS"
    )
    NOTIFIER_PLUGIN_PATHS: List[str] = Field(
        default_factory=list, alias="NOTIFIER_PLUGIN_PATHS"
    )

    @field_validator("NOTIFIER_HANDLER_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Reject zero or negative timeouts."""
        if v is not None and v <= 0:
            raise ValueError(f"Handler timeout must be positive: {v}")
        return v

    @field_validator("NOTIFIER_HANDLER_ORDER")
    @classmethod
    def validate_handler_order(cls, v: List[str]) -> List[str]:
        """Ensure each handler name appears once."""
        if len(set(v)) != len(v):
            raise ValueError(f"Handler order contains duplicates: {v}")
        return v
