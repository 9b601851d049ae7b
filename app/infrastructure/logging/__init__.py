"""Structured logging infrastructure.

Centralized logging configuration and utilities for the notifier using
structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Logger bound to the calling module
    - bind_request_context(): Context manager for invocation-scoped logging
    - get_correlation_id(): Get current correlation ID from context

Formatters:
    - add_app_info(): Processor to add app name/version
    - add_environment_info(): Processor to add environment name
    - mask_sensitive_data(): Processor to redact sensitive fields
    - truncate_large_values(): Processor to limit string lengths
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
)

from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_request_context",
    "get_correlation_id",
    # Formatters
    "add_app_info",
    "add_environment_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
