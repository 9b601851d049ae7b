"""Plugin managers and utilities."""

import pluggy

# Singleton hookimpl marker for entire application
hookimpl = pluggy.HookimplMarker("notifier")

from infrastructure.services.plugins.notifications import (  # noqa: E402
    get_handler_plugin_manager,
    discover_handlers,
)

__all__ = [
    "hookimpl",
    "get_handler_plugin_manager",
    "discover_handlers",
]
