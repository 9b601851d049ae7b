"""Notification handler plugin manager."""

import importlib
from functools import lru_cache
from typing import TYPE_CHECKING, Dict, List

import pluggy
import structlog

from infrastructure.hookspecs import notifications as notification_hookspecs
from infrastructure.services.plugins.base import auto_discover_plugins

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.notifications.handlers.base import NotificationHandler

logger = structlog.get_logger()

BUILTIN_HANDLERS_MODULE = "infrastructure.notifications.handlers"


@lru_cache(maxsize=1)
def get_handler_plugin_manager() -> pluggy.PluginManager:
    """Get the notification handler plugin manager singleton.

    Returns:
        PluginManager with the hook specs added and the built-in handlers
        registered.
    """
    pm = pluggy.PluginManager("notifier")
    pm.add_hookspecs(notification_hookspecs)
    pm.register(importlib.import_module(BUILTIN_HANDLERS_MODULE))

    logger.info("handler_plugin_manager_created")
    return pm


def order_handlers(
    handlers: List["NotificationHandler"], order: List[str]
) -> List["NotificationHandler"]:
    """Arrange handlers by configured name order.

    Listed names come first in listed order; handlers that are not listed
    follow in their discovery order.

    Args:
        handlers: Discovered handlers.
        order: Configured handler names.

    Returns:
        Ordered list of handlers.

    Raises:
        ValueError: If two handlers share a name or a listed name has no
            handler.
    """
    by_name: Dict[str, "NotificationHandler"] = {}
    for handler in handlers:
        if handler.name in by_name:
            raise ValueError(f"Duplicate notification handler name: {handler.name}")
        by_name[handler.name] = handler

    unknown = [name for name in order if name not in by_name]
    if unknown:
        raise ValueError(
            f"Configured handler order names unknown handlers: {unknown} "
            f"(available: {list(by_name)})"
        )

    listed = [by_name[name] for name in order]
    remaining = [h for h in handlers if h.name not in order]
    return listed + remaining


def discover_handlers(settings: "Settings") -> List["NotificationHandler"]:
    """Discover handler plugins and return them in routing order.

    Args:
        settings: Settings providing plugin paths and handler order.

    Returns:
        Ordered list of handler instances.
    """
    pm = get_handler_plugin_manager()

    plugin_paths = settings.notifications.NOTIFIER_PLUGIN_PATHS
    if plugin_paths:
        auto_discover_plugins(pm, base_paths=plugin_paths)

    # pluggy calls implementations last-registered first
    contributed = reversed(
        pm.hook.register_notification_handlers(settings=settings)
    )
    handlers = [handler for batch in contributed for handler in batch or []]

    ordered = order_handlers(
        handlers, settings.notifications.NOTIFIER_HANDLER_ORDER
    )
    logger.info(
        "notification_handlers_discovered",
        plugin_count=len(pm.get_plugins()),
        handlers=[h.name for h in ordered],
    )
    return ordered
