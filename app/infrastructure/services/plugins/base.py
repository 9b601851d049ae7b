"""Base plugin discovery utilities."""

import importlib
import pkgutil
from pathlib import Path
from typing import List

import pluggy
import structlog

logger = structlog.get_logger()


def auto_discover_plugins(
    pm: pluggy.PluginManager,
    base_paths: List[str],
) -> None:
    """Auto-discover and register plugins from base paths.

    Each package found directly under a base path is imported and
    registered, so any function it decorates with @hookimpl becomes part
    of the hook. Import failures are logged and skipped.

    Args:
        pm: Plugin manager to register plugins with.
        base_paths: Importable base paths to search (e.g., ["plugins"]).

    Example:
        >>> pm = pluggy.PluginManager("notifier")
        >>> pm.add_hookspecs(hookspecs.notifications)
        >>> auto_discover_plugins(pm, base_paths=["plugins"])
    """
    for base_path in base_paths:
        path = Path(base_path)
        if not path.exists():
            logger.warning("base_path_not_found", path=str(path))
            continue

        logger.debug("scanning_base_path", path=str(path))

        for pkg_info in pkgutil.iter_modules([str(path)]):
            if not pkg_info.ispkg:
                continue
            module_name = f"{base_path.replace('/', '.')}.{pkg_info.name}"
            try:
                module = importlib.import_module(module_name)
                if pm.is_registered(module):
                    continue
                pm.register(module)
                logger.debug("plugin_registered", module=module_name)
            except Exception as e:
                logger.error(
                    "plugin_registration_failed",
                    module=module_name,
                    error=str(e),
                    exc_info=True,
                )
