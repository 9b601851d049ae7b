"""Hook specifications for notification handler registration."""

import pluggy
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.notifications.handlers.base import NotificationHandler

hookspec = pluggy.HookspecMarker("notifier")


@hookspec
def register_notification_handlers(settings: "Settings") -> List["NotificationHandler"]:
    """Return the notification handlers provided by a plugin.

    Args:
        settings: Application settings, for handlers that need configuration.

    Returns:
        Handler instances. Their relative order is kept unless
        NOTIFIER_HANDLER_ORDER says otherwise.
    """
